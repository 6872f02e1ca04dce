"""Exception hierarchy."""


class LintscopeError(Exception):
  """Base class for errors reported to the user."""


class UnsupportedLanguageError(LintscopeError, ValueError):
  """Raised when a language tag has no rule table."""


class RuleDefinitionError(LintscopeError):
  """Raised while building a rule table with a malformed rule."""


class FileError(LintscopeError):
  """Raised when input files cannot be found or read."""


class ConfigError(LintscopeError):
  """Raised when a configuration file is invalid."""
