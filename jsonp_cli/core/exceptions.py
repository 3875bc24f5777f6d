"""
Custom exceptions for JSONP-CLI.

Provides specific exception types for better error handling and user feedback.
"""


class JsonpCLIError(Exception):
    """Base exception for JSONP-CLI errors."""

    user_message: str = "Something went wrong."
    recovery_hint: str = ""


class ConfigurationError(JsonpCLIError):
    """Error in configuration."""

    def __init__(self, message: str):
        super().__init__(message)
        self.user_message = message
        self.recovery_hint = "Check the config file or run: jsonp config <key> <value>"


class InputError(JsonpCLIError):
    """Malformed or unknown interactive input."""

    def __init__(self, message: str):
        super().__init__(message)
        self.user_message = message
        self.recovery_hint = "Type /help for available commands."


class ExternalCallError(JsonpCLIError):
    """The generation endpoint could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
        if status_code is not None:
            self.user_message = f"API request failed ({status_code})"
        else:
            self.user_message = "Failed to connect to Ollama."
        self.recovery_hint = "Make sure Ollama is running: ollama serve"


class PersistenceError(JsonpCLIError):
    """Generated output could not be written to disk."""

    def __init__(self, message: str):
        super().__init__(f"Failed to save output: {message}")
        self.user_message = "Could not save the generated JSON."
        self.recovery_hint = "Check permissions of the output directory or change it with /output."


class ParseError(JsonpCLIError):
    """Generated text is not valid JSON."""

    def __init__(self, details: str):
        super().__init__(f"Invalid JSON: {details}")
        self.user_message = "The model did not return valid JSON."
        self.recovery_hint = "Try again or pick another model with /model."


def format_error_message(error: Exception) -> str:
    """
    Format an error message for display to user.

    Args:
        error: Exception to format

    Returns:
        Formatted error message with recovery hints
    """
    if isinstance(error, JsonpCLIError):
        message = error.user_message
        if error.recovery_hint:
            message += f"\n\n💡 {error.recovery_hint}"
        return message
    return str(error)
