"""External editor sessions over a temporary file."""

import os
import logging
import subprocess
import tempfile

from config import DEFAULT_EDITOR, TEMP_DIR
from utils.error_handler import EditorError

logger = logging.getLogger("ngx.editor")


def get_editor():
    """Editor command from $EDITOR, falling back to DEFAULT_EDITOR."""
    return os.environ.get("EDITOR") or DEFAULT_EDITOR


def edit(content, extension="tmp"):
    """
    Open content in the user's editor and return the saved text.

    Blocks until the editor exits. The temporary file is removed
    afterwards whether or not the session succeeded.

    Args:
        content: Initial text
        extension: File extension, lets the editor pick syntax highlighting

    Returns:
        str: File contents after the editor exits

    Raises:
        EditorError: If the editor cannot be started or exits non-zero
    """
    suffix = f".tmp.{extension}" if extension else ".tmp"
    with tempfile.NamedTemporaryFile(
        mode="w", delete=False, prefix="ngx-", suffix=suffix, dir=TEMP_DIR
    ) as f:
        f.write(content)
        tmp_file = f.name

    editor = get_editor()
    try:
        logger.info("editing %s with %s", tmp_file, editor)
        result = subprocess.run([editor, tmp_file])
        if result.returncode != 0:
            raise EditorError(f"{editor} exited with status {result.returncode}")
        with open(tmp_file, "r") as f:
            return f.read()
    except OSError as e:
        raise EditorError(f"Could not run editor: {editor}", details=str(e)) from e
    finally:
        try:
            os.unlink(tmp_file)
        except FileNotFoundError:
            pass
