from pydantic import BaseModel, ConfigDict, Field


class LayoutRules(BaseModel):
    selector: str = "#barchart"
    height_ratio: float = Field(default=0.5, gt=0, le=1)

    model_config = ConfigDict(extra="forbid")


class MarginRules(BaseModel):
    top: int = Field(default=10, ge=0)
    right: int = Field(default=10, ge=0)
    bottom: int = Field(default=40, ge=0)
    left: int = Field(default=60, ge=0)

    model_config = ConfigDict(extra="forbid")


class ScaleRules(BaseModel):
    band_padding: float = Field(default=0.1, ge=0, lt=1)
    y_tick_count: int = Field(default=10, ge=1)

    model_config = ConfigDict(extra="forbid")


class LabelRules(BaseModel):
    x_axis: str = "Bin ID"
    y_axis: str = "Count in Bin"

    model_config = ConfigDict(extra="forbid")


class ChartRules(BaseModel):
    layout: LayoutRules = Field(default_factory=LayoutRules)
    margins: MarginRules = Field(default_factory=MarginRules)
    scale: ScaleRules = Field(default_factory=ScaleRules)
    labels: LabelRules = Field(default_factory=LabelRules)

    model_config = ConfigDict(extra="forbid")
