"""buildnumber orchestrator — one build-number run from read to tag.

Usage:
    from buildnumber.orchestrator import BuildOrchestrator

    result = BuildOrchestrator(config, store, revisions).run()
    print(result.summary())
"""

from buildnumber.orchestrator.engine import BuildOrchestrator, BuildResult

__all__ = ["BuildOrchestrator", "BuildResult"]
