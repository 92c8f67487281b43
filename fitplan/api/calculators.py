from fastapi import APIRouter

from fitplan.schemas.metrics import (
    BMIRead,
    BMIRequest,
    MacrosRead,
    MacrosRequest,
    WaterRead,
    WaterRequest,
)
from fitplan.services.metrics import (
    calculate_bmi,
    calculate_macros,
    calculate_water_intake,
    get_bmi_category,
)

router = APIRouter(prefix="/calculators", tags=["calculators"])


@router.post("/bmi", response_model=BMIRead)
async def bmi(data: BMIRequest):
    value = calculate_bmi(data.weight, data.height)
    return BMIRead(bmi=value, category=get_bmi_category(value))


@router.post("/macros", response_model=MacrosRead)
async def macros(data: MacrosRequest):
    return calculate_macros(data.calories, data.goal)


@router.post("/water", response_model=WaterRead)
async def water(data: WaterRequest):
    return WaterRead(liters=calculate_water_intake(data.weight, data.activity_level))
