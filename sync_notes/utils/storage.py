"""
Note storage utility.
One flat directory, one file per note, named after the note id. The file's
access time is the collector's clock.
"""

import logging
import os
import time
from typing import Callable, Optional
from uuid import UUID

from sync_notes.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)

DIR_MODE = 0o775
FILE_MODE = 0o664


class DocumentStore:
    """
    Disk storage for notes.

    Concurrent writers to the same id are not serialized: whichever write
    lands last wins, and a read racing the collector may see either the old
    content or nothing.
    """

    def __init__(self, directory: str, clock: Callable[[], float] = time.time):
        self.directory = directory
        self._clock = clock

    def init(self) -> None:
        """Create the storage directory if it is missing."""
        try:
            os.makedirs(self.directory, mode=DIR_MODE, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create storage directory {self.directory}: {e}") from e

    def path_for(self, note_id: UUID) -> str:
        return os.path.join(self.directory, str(note_id))

    def exists(self, note_id: UUID) -> bool:
        """Check whether a note is stored under this id."""
        return os.path.isfile(self.path_for(note_id))

    def create(self, note_id: UUID, payload: bytes) -> None:
        """
        Write a note, replacing any existing one.

        The caller is responsible for having consumed a create-note token
        for ``note_id``; duplicates are not rejected here.
        """
        self._write(note_id, payload)

    def update(self, note_id: UUID, payload: bytes) -> None:
        """Overwrite an existing note. Raises NotFoundError if absent."""
        if not self.exists(note_id):
            raise NotFoundError(f"Note {note_id} not found")
        self._write(note_id, payload)

    def read(self, note_id: UUID) -> Optional[bytes]:
        """
        Read a note and mark it as accessed.

        Returns:
            The stored payload, or None if no note exists for ``note_id``
        """
        path = self.path_for(note_id)
        try:
            with open(path, "rb") as f:
                payload = f.read()
            # Mount options like noatime would otherwise freeze the GC clock
            os.utime(path, (self._clock(), os.stat(path).st_mtime))
        except (FileNotFoundError, IsADirectoryError):
            return None
        except OSError as e:
            logger.error("Error while reading note %s: %s", note_id, e)
            raise StorageError(f"Cannot read note {note_id}") from e
        return payload

    def _write(self, note_id: UUID, payload: bytes) -> None:
        path = self.path_for(note_id)
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            now = self._clock()
            os.utime(path, (now, now))
        except OSError as e:
            logger.error("Error while saving note %s: %s", note_id, e)
            raise StorageError(f"Cannot save note {note_id}") from e
