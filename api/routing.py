from fastapi import APIRouter, HTTPException
from schemas.routing import RoutingRequest
from routing.builder import build_routing_model
from exceptions.custom_errors import *
from docs.routing.solve import routing_solve_description
import traceback

router = APIRouter(prefix="/routing", tags=["Routing"])


@router.post(
    "/solve",
    response_model=dict,
    description=routing_solve_description,
    summary="Solve Routes",
)
def solve_routes(request: RoutingRequest):
    try:
        stops, totals = build_routing_model(request.data, time_limit=request.timeLimit)
        return {
            "stops": stops.to_dict(orient="records"),
            "totals": totals,
        }

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
