"""
Constants, status codes and exit codes for safe-unzip.
"""

import os

# Environment variables
CONTINUE_ON_ERROR_ENV = 'SAFE_UNZIP_CONTINUE_ON_ERROR'
LOG_LEVEL_ENV = 'SAFE_UNZIP_LOG_LEVEL'

TARGET_SEPARATORS = ('/', os.sep)


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    ARCHIVE_OPEN_FAILED = 1
    INVALID_PATH = 2
    EXTRACTION_FAILED = 3
    UNEXPECTED_ERROR = 4


class ZipStatus:
    """Archive status codes (libzip numbering)."""
    OK = 0
    MULTIDISK = 1
    RENAME = 2
    CLOSE = 3
    SEEK = 4
    READ = 5
    WRITE = 6
    CRC = 7
    ZIPCLOSED = 8
    NOENT = 9
    EXISTS = 10
    OPEN = 11
    TMPOPEN = 12
    ZLIB = 13
    MEMORY = 14
    CHANGED = 15
    COMPNOTSUPP = 16
    EOF = 17
    INVAL = 18
    NOZIP = 19
    INTERNAL = 20
    INCONS = 21
    REMOVE = 22
    DELETED = 23
    ENCRNOTSUPP = 24


STATUS_STRINGS = {
    ZipStatus.OK: 'No error',
    ZipStatus.MULTIDISK: 'Multi-disk zip archives not supported',
    ZipStatus.RENAME: 'Renaming temporary file failed',
    ZipStatus.CLOSE: 'Closing zip archive failed',
    ZipStatus.SEEK: 'Seek error',
    ZipStatus.READ: 'Read error',
    ZipStatus.WRITE: 'Write error',
    ZipStatus.CRC: 'CRC error',
    ZipStatus.ZIPCLOSED: 'Containing zip archive was closed',
    ZipStatus.NOENT: 'No such file',
    ZipStatus.EXISTS: 'File already exists',
    ZipStatus.OPEN: "Can't open file",
    ZipStatus.TMPOPEN: 'Failure to create temporary file',
    ZipStatus.ZLIB: 'Zlib error',
    ZipStatus.MEMORY: 'Malloc failure',
    ZipStatus.CHANGED: 'Entry has been changed',
    ZipStatus.COMPNOTSUPP: 'Compression method not supported',
    ZipStatus.EOF: 'Premature EOF',
    ZipStatus.INVAL: 'Invalid argument',
    ZipStatus.NOZIP: 'Not a zip archive',
    ZipStatus.INTERNAL: 'Internal error',
    ZipStatus.INCONS: 'Zip archive inconsistent',
    ZipStatus.REMOVE: "Can't remove file",
    ZipStatus.DELETED: 'Entry has been deleted',
}

UNKNOWN_STATUS = 'Unknown status'
