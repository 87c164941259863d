from pathlib import Path

from app.vision.exceptions import VisionConfigurationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the document transcription prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled document_prompt.txt.

    Returns:
        The raw template string with ``{full_name}`` and ``{dob}`` placeholders.

    Raises:
        VisionConfigurationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "document_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise VisionConfigurationError(f"Failed to load prompt template: {exc}") from exc
