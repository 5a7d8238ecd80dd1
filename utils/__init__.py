"""Utility functions for ngx - shell commands, editor, logging, error handling."""

from utils.error_handler import (
    NgxError,
    ConfigIOError,
    ConfigWriteError,
    DiscoveryError,
    PrivilegeError,
    ValidationError,
    AlreadyExistsError,
    WriteError,
    LinkError,
    UnlinkError,
    EditorError,
    ServiceError,
    handle_error,
    init_error_handler,
    ERROR_CODES,
)

from utils.shell import (
    run_command,
    service_control,
    check_root,
    require_root,
)

from utils.editor import edit, get_editor

from utils.logger import (
    Logger,
    log,
    setup_file_logging,
)
