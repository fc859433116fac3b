"""API routes for fixture reconciliation."""

from fastapi import APIRouter

from fixturelink.api.models import BatchReconcileRequest, MatchResultResponse, ReconcileRequest
from fixturelink.consumers.matching import reconcile
from fixturelink.consumers.reconciliation import reconcile_fixtures

router = APIRouter(prefix="/reconcile", tags=["Reconciliation"])


@router.post("", response_model=MatchResultResponse)
def reconcile_fixture(request: ReconcileRequest) -> MatchResultResponse:
    """Link one fixture to the best candidate in the supplied pool.

    The pool is used as given; no date windowing is applied here.
    """
    result = reconcile(
        request.fixture.to_fixture(),
        [c.to_candidate() for c in request.candidates],
        request.competition_code,
    )
    return MatchResultResponse.from_result(result)


@router.post("/batch")
def reconcile_batch(request: BatchReconcileRequest) -> dict:
    """Link a schedule to a candidate pool, windowing candidates by date."""
    batch = reconcile_fixtures(
        [f.to_fixture() for f in request.fixtures],
        [c.to_candidate() for c in request.candidates],
        competition_code=request.competition_code,
        workers=request.workers,
    )
    return batch.to_dict()
