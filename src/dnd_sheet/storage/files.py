"""Reading and writing character files on disk.

Character files are UTF-8 JSON with a ``.dnd5e`` extension; ``.json`` is
accepted as well. Saving refreshes ``metadata.updated_at``; loading goes
through the same version-gated ``deserialize_character`` as any other text.
"""

from __future__ import annotations

import re
from pathlib import Path

from dnd_sheet.core.config import get_settings
from dnd_sheet.core.constants import CHARACTER_FILE_EXTENSION, CHARACTER_FILE_EXTENSIONS
from dnd_sheet.core.exceptions import CharacterFileIOError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.models.character_file import CharacterFile
from dnd_sheet.storage.schema import deserialize_character, serialize_character, update_metadata


logger = get_logger(__name__)


def ensure_extension(path: str | Path, extension: str = CHARACTER_FILE_EXTENSION) -> Path:
    """Append the character file extension unless the path already has an accepted one.

    Example:
        >>> ensure_extension("thorin")
        PosixPath('thorin.dnd5e')
        >>> ensure_extension("thorin.json")
        PosixPath('thorin.json')
    """
    path = Path(path)
    if path.name.lower().endswith(CHARACTER_FILE_EXTENSIONS):
        return path
    return path.with_name(path.name + extension)


def default_character_path(name: str) -> Path:
    """Build a file path for a character inside the configured characters directory.

    The name is reduced to a lowercase slug; an empty slug falls back to
    ``character``.
    """
    storage = get_settings().storage
    slug = re.sub(r"[^\w]+", "-", name.strip().lower()).strip("-_") or "character"
    return storage.characters_path / f"{slug}{storage.default_extension}"


def save_character_file(
    character_file: CharacterFile,
    path: str | Path | None = None,
) -> tuple[CharacterFile, Path]:
    """Write a character file to disk.

    Args:
        character_file: The file to save.
        path: Destination. Defaults to ``default_character_path`` for the
            character's name. The extension is added when missing.

    Returns:
        The saved file (with refreshed ``updated_at``) and the final path.

    Raises:
        CharacterFileIOError: If the file cannot be written.
    """
    if path is None:
        target = default_character_path(character_file.character.basics.name)
    else:
        target = ensure_extension(path, get_settings().storage.default_extension)

    saved = character_file.model_copy(
        update={"metadata": update_metadata(character_file.metadata)}
    )
    text = serialize_character(saved)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        logger.exception("Failed to save character", path=str(target))
        raise CharacterFileIOError(
            f"Could not write character file: {exc}",
            source_file=str(target),
        ) from exc

    logger.info(
        "Character saved",
        name=saved.character.basics.name,
        path=str(target),
        updated_at=saved.metadata.updated_at,
    )
    return saved, target


def load_character_file(path: str | Path) -> CharacterFile:
    """Read and deserialize a character file.

    Raises:
        CharacterFileIOError: If the file cannot be read.
        CharacterFileError: Any of the deserialization errors, with the
            path recorded as ``source_file``.
    """
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.exception("Failed to load character", path=str(source))
        raise CharacterFileIOError(
            f"Could not read character file: {exc}",
            source_file=str(source),
        ) from exc

    character_file = deserialize_character(text, source_file=str(source))
    logger.info(
        "Character loaded",
        name=character_file.character.basics.name,
        path=str(source),
        version=character_file.metadata.version,
    )
    return character_file


__all__ = [
    "ensure_extension",
    "default_character_path",
    "save_character_file",
    "load_character_file",
]
