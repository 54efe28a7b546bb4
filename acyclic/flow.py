"""Run a callback over a vertex and its descendants in dependency order."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, Iterable, List, Optional

from .dag import DAG


@dataclass
class FlowResult:
    """What one vertex produced during a flow.

    ``error`` holds the exception the callback raised, if any; the flow
    itself ignores it and passes it on to the children.
    """

    id: str
    result: Any = None
    error: Optional[BaseException] = None


FlowCallback = Callable[[DAG, str, List[FlowResult]], Any]


def descendants_flow(
    dag: DAG,
    start_id: str,
    inputs: Optional[Iterable[FlowResult]],
    callback: FlowCallback,
) -> List[FlowResult]:
    """Call ``callback`` for the start vertex and each of its descendants.

    A vertex's callback runs only after all of its parents within the flow
    have finished, and receives their results; the start vertex receives
    ``inputs``. Returns the results of the vertices without children.
    """
    descendants = dag.get_descendants(start_id)
    in_flow = set(descendants) | {start_id}

    remaining: Dict[str, int] = {
        vid: sum(1 for parent in dag.get_parents(vid) if parent in in_flow)
        for vid in descendants
    }
    inbox: Dict[str, List[FlowResult]] = {vid: [] for vid in descendants}
    inbox[start_id] = list(inputs or [])

    ready: Deque[str] = deque([start_id])
    results: List[FlowResult] = []
    while ready:
        vid = ready.popleft()
        parent_results = inbox.pop(vid)
        try:
            flow_result = FlowResult(vid, callback(dag, vid, parent_results))
        except Exception as exc:
            flow_result = FlowResult(vid, None, exc)

        children = dag.get_children(vid)
        if not children:
            results.append(flow_result)
            continue
        for child in children:
            inbox[child].append(flow_result)
            remaining[child] -= 1
            if remaining[child] == 0:
                ready.append(child)
    return results