from fastapi import APIRouter, HTTPException
from schemas.schedule import ScheduleRequest
from scheduler.builder import build_schedule_model
from exceptions.custom_errors import *
from docs.schedule.generate import schedule_generate_description
import traceback

router = APIRouter(prefix="/schedule", tags=["Schedule"])


# generate schedule
@router.post(
    "/generate",
    response_model=dict,
    description=schedule_generate_description,
    summary="Generate Schedule",
)
def generate_schedule(request: ScheduleRequest):
    try:
        schedule, summary, penalties, metrics = build_schedule_model(
            request.data,
            timeout=request.timeLimit,
            num_workers=request.numWorkers,
            seed=request.randomSeed,
        )

        # ---- schedule ----
        sched_df = schedule.reset_index().rename(columns={"index": "employee"})

        # ---- summary ----
        sum_df = summary.reset_index().rename(columns={"Employee": "employee"})

        # ==== final response ====
        return {
            "schedule": sched_df.to_dict(orient="records"),
            "summary": sum_df.to_dict(orient="records"),
            "penalties": penalties,
            "metrics": metrics,
        }

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
