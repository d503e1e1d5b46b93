from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from pydantic import BaseModel, field_validator

_CENTS = Decimal("0.01")


def _to_scale_2(v):
    if v is None:
        return None
    try:
        return Decimal(str(v)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"{v} is not a valid decimal number.") from None


class Category(BaseModel):
    category_id: int | None = None
    category_name: str | None = None

    def __str__(self) -> str:
        return f"ID={self.category_id}, category_name={self.category_name}"


class Material(BaseModel):
    material_id: int | None = None
    project_id: int | None = None
    material_name: str | None = None
    num_required: int | None = None
    cost: Decimal | None = None

    @field_validator("cost", mode="before")
    @classmethod
    def normalize_cost(cls, v):
        return _to_scale_2(v)

    def __str__(self) -> str:
        return (
            f"ID={self.material_id}, material_name={self.material_name}, "
            f"num_required={self.num_required}, cost={self.cost}"
        )


class Step(BaseModel):
    step_id: int | None = None
    project_id: int | None = None
    step_text: str | None = None
    step_order: int | None = None

    def __str__(self) -> str:
        return f"ID={self.step_id}, step_order={self.step_order}, step_text={self.step_text}"


class Project(BaseModel):
    """A project row plus, when fetched by id, its materials, steps and categories."""

    project_id: int | None = None
    project_name: str | None = None
    estimated_hours: Decimal | None = None
    actual_hours: Decimal | None = None
    difficulty: int | None = None
    notes: str | None = None

    materials: list[Material] = []
    steps: list[Step] = []
    categories: list[Category] = []

    @field_validator("estimated_hours", "actual_hours", mode="before")
    @classmethod
    def normalize_hours(cls, v):
        return _to_scale_2(v)

    def __str__(self) -> str:
        lines = [
            f"\n   project_id={self.project_id}",
            f"   project_name={self.project_name}",
            f"   estimated_hours={self.estimated_hours}",
            f"   actual_hours={self.actual_hours}",
            f"   difficulty={self.difficulty}",
            f"   notes={self.notes}",
            "\n   Materials:",
        ]
        lines += [f"      {m}" for m in self.materials]
        lines.append("\n   Steps:")
        lines += [f"      {s}" for s in self.steps]
        lines.append("\n   Categories:")
        lines += [f"      {c}" for c in self.categories]
        return "\n".join(lines)
