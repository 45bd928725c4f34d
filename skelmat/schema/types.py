# pydantic models: MatInfo
from pydantic import BaseModel, Field
from typing import Literal, Tuple

Depth = Literal["8U", "8S", "16U", "16S", "32S", "64S", "32F", "64F"]
Shape2D = Tuple[int, int]

class MatInfo(BaseModel):
    rows: int = Field(ge=0)
    cols: int = Field(ge=0)
    channels: int = Field(ge=1, le=512)
    depth: Depth

    @property
    def type(self) -> str:
        return f"CV_{self.depth}C{self.channels}"

    @property
    def shape(self) -> Shape2D:
        return (self.rows, self.cols)
