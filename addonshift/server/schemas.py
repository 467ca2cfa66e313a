from typing import Any

from pydantic import BaseModel, Field, model_validator


class AddonSubmission(BaseModel):
    addons: list[dict[str, Any]] = Field(
        ...,
        description="Addon definitions as stored in the catalog.",
    )
    values: dict[str, Any] = Field(
        default_factory=dict,
        examples=[{"addon-gift-wrap": ["gift-wrap"]}],
        description="Posted values keyed by request key (addon-<field name>).",
    )
    customer_id: str | None = Field(default=None)
    base_amount: float | str | None = Field(default=None)
    quantity: int = Field(default=1, ge=1)
    strict: bool = Field(default=False)
    test: bool = Field(default=False)

    @model_validator(mode="before")
    @classmethod
    def _compat_single_addon(cls, data: Any) -> Any:
        """Accept a single ``addon`` object as an alias."""
        if isinstance(data, dict) and "addon" in data and "addons" not in data:
            data["addons"] = [data.pop("addon")]
        return data

    @property
    def has_price_context(self) -> bool:
        return self.base_amount is not None or self.quantity != 1
