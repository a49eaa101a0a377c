"""
Pydantic model for application configuration.
Provides robust validation for all settings.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

OUTPUT_FORMATS = ("table", "json", "js")


class CatalogConfig(BaseModel):
    """A validated configuration model for the application."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # Catalog sources
    catalog_file: str = ""
    assets_dir: str = "."

    # Display & logging
    output_format: str = "table"
    json_logs: bool = False

    # Internal fields not loaded from INI file
    config_path: str = Field(..., repr=False)

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        v = v.lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(
                f"Output format must be one of {', '.join(OUTPUT_FORMATS)}, got '{v}'."
            )
        return v

    @field_validator("catalog_file")
    @classmethod
    def validate_catalog_file(cls, v: str) -> str:
        """Ensures an extra catalog, when configured, is a JSON document."""
        if v and not v.lower().endswith(".json"):
            raise ValueError("Catalog file must be a .json document.")
        return v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        internal_fields = {"config_path"}
        return {key for key in cls.model_fields if key not in internal_fields}
