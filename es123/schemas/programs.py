"""Result schemas for the demonstration programs."""
from typing import List

from pydantic import BaseModel, ConfigDict, computed_field

from es123.formatting import DEFAULT_PRECISION, format_number


class Greeting(BaseModel):
    """Name and age read by the greeting program."""
    first_name: str
    age: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"first_name": "Ada", "age": 30, "message": "Hello, Ada (age 30)"}
        }
    )

    @computed_field
    @property
    def message(self) -> str:
        return f"Hello, {self.first_name} (age {self.age})"

    def lines(self, precision: int = DEFAULT_PRECISION) -> List[str]:
        # name and age are printed as typed
        return [self.message]


class OperatorLine(BaseModel):
    """One ``<expression> == <result>`` row."""
    expression: str
    result: float

    def render(self, precision: int = DEFAULT_PRECISION) -> str:
        return f"{self.expression} == {format_number(self.result, precision)}"


class OperatorTable(BaseModel):
    """Operators applied to a single floating point value."""
    value: float

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "value": 2.0,
                "rows": [
                    {"expression": "v", "result": 2.0},
                    {"expression": "v+1", "result": 3.0},
                    {"expression": "3*v", "result": 6.0},
                    {"expression": "v+v", "result": 4.0},
                    {"expression": "v*v", "result": 4.0},
                    {"expression": "v/2", "result": 1.0},
                ],
            }
        }
    )

    @computed_field
    @property
    def rows(self) -> List[OperatorLine]:
        v = self.value
        return [
            OperatorLine(expression="v", result=v),
            OperatorLine(expression="v+1", result=v + 1),
            OperatorLine(expression="3*v", result=3 * v),
            OperatorLine(expression="v+v", result=v + v),
            OperatorLine(expression="v*v", result=v * v),
            OperatorLine(expression="v/2", result=v / 2),
        ]

    def lines(self, precision: int = DEFAULT_PRECISION) -> List[str]:
        return [row.render(precision) for row in self.rows]
