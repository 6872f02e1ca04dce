"""Application settings."""

from pydantic import BaseModel, ConfigDict, Field

from lintscope.models import Category, Language, Severity


class Settings(BaseModel):
  """User configuration applied around the analysis engine."""

  model_config = ConfigDict(use_enum_values=False)

  language: Language | None = None
  disabled_rules: list[str] = Field(default_factory=list)
  severities: list[Severity] = Field(default_factory=lambda: list(Severity))
  categories: list[Category] = Field(default_factory=lambda: list(Category))
  max_issues: int | None = Field(default=None, ge=0)
