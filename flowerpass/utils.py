"""
Restricting files that may hold the master password to their owner.
"""

import platform
import os
import stat
import logging

logger = logging.getLogger(__name__)

IS_WINDOWS = platform.system() == "Windows"
OWNER_ONLY_MODE = stat.S_IRUSR | stat.S_IWUSR  # 600
ERROR_ACCESS_DENIED = 5

if IS_WINDOWS:
    try:
        import win32security
        import win32api
        import win32con
        import win32file
        WINDOWS_SECURITY_AVAILABLE = True
    except ImportError:
        logger.warning("pywin32 not fully installed, settings file permissions cannot be restricted.")
        WINDOWS_SECURITY_AVAILABLE = False
else:
    WINDOWS_SECURITY_AVAILABLE = False


def _owner_only_dacl():
    """A DACL with a single read/write entry for the user running the app."""
    user_sid, _, _ = win32security.LookupAccountName(None, win32api.GetUserName())
    dacl = win32security.ACL()
    dacl.AddAccessAllowedAce(
        win32security.ACL_REVISION,
        win32con.GENERIC_READ | win32con.GENERIC_WRITE,
        user_sid
    )
    return dacl


def _restrict_windows(filepath: str) -> bool:
    if not WINDOWS_SECURITY_AVAILABLE:
        logger.warning(f"Cannot restrict {filepath}: pywin32 not available.")
        return False

    try:
        handle = win32file.CreateFile(
            filepath,
            win32con.WRITE_DAC,
            win32file.FILE_SHARE_READ | win32file.FILE_SHARE_WRITE | win32file.FILE_SHARE_DELETE,
            None,
            win32con.OPEN_EXISTING,
            win32con.FILE_ATTRIBUTE_NORMAL,
            None
        )
        try:
            # Protected: entries inherited from the folder are dropped
            win32security.SetSecurityInfo(
                handle,
                win32security.SE_FILE_OBJECT,
                win32security.DACL_SECURITY_INFORMATION | win32security.PROTECTED_DACL_SECURITY_INFORMATION,
                None,
                None,
                _owner_only_dacl(),
                None
            )
        finally:
            win32file.CloseHandle(handle)
    except win32api.error as e:
        if e.winerror == ERROR_ACCESS_DENIED:
            # The file itself was written; only the hardening step failed
            logger.warning(f"Access denied while restricting {filepath}. The settings were saved with default permissions.")
            return True
        logger.error(f"Failed to restrict {filepath}: {e}")
        return False

    logger.debug(f"Restricted {filepath} to the current user.")
    return True


def set_owner_only_permissions(filepath: str) -> bool:
    """
    Make a file readable and writable by its owner only.

    Uses chmod 600 on POSIX and a protected DACL via pywin32 on Windows.

    Returns:
        False if the permissions could not be changed
    """
    if IS_WINDOWS:
        return _restrict_windows(filepath)
    try:
        os.chmod(filepath, OWNER_ONLY_MODE)
    except OSError as e:
        logger.error(f"Failed to chmod {filepath}: {e}")
        return False
    return True
