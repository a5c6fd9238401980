"""Translation engine settings."""

from pydantic import Field, field_validator

from modtranslate.configuration.base import InfrastructureSettings

SUPPORTED_FILE_FORMATS = ("json", "yaml")


class I18nSettings(InfrastructureSettings):
    """Translation lookup and loading configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when the host has not set one (default: en)
        I18N_FALLBACK_LOCALE: Last locale in every fallback chain (default: default)
        I18N_DIRECTORY_NAME: Name of the per-mod translations folder (default: i18n)
        I18N_FILE_FORMAT: Translation file format, 'json' or 'yaml' (default: json)
        I18N_USE_PLACEHOLDER: Render missing translations as
            "(no translation:<key>)" instead of an empty string (default: False)

    Example:
        ```python
        from modtranslate.configuration import settings

        helper = TranslationHelper(
            mod_id="Author.Mod",
            mod_name="Mod",
            locale=settings.i18n.default_locale,
        )
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale used when the host has not set one",
    )
    fallback_locale: str = Field(
        default="default",
        alias="I18N_FALLBACK_LOCALE",
        description="Locale appended to the end of every fallback chain",
    )
    directory_name: str = Field(
        default="i18n",
        alias="I18N_DIRECTORY_NAME",
        description="Folder inside each mod directory holding translation files",
    )
    file_format: str = Field(
        default="json",
        alias="I18N_FILE_FORMAT",
        description="Translation file format: 'json' or 'yaml'",
    )
    use_placeholder: bool = Field(
        default=False,
        alias="I18N_USE_PLACEHOLDER",
        description="Render missing translations as a visible placeholder",
    )

    @field_validator("file_format", mode="before")
    @classmethod
    def validate_file_format(cls, v):
        value = str(v).strip().lower()
        if value == "yml":
            value = "yaml"
        if value not in SUPPORTED_FILE_FORMATS:
            raise ValueError(
                f"Unsupported translation file format: {v} "
                f"(expected one of {', '.join(SUPPORTED_FILE_FORMATS)})"
            )
        return value
