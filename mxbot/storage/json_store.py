"""
Файловое хранилище состояния в JSON.

Один файл - одна pydantic-модель. Файл всегда перезаписывается целиком.
"""
import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import ClassVar, Generic, Iterator, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from mxbot.core.paths import data_path
from mxbot.domain import (
    StoreCorruptedError,
    StoreCreateError,
    StoreOpenError,
    StoreReadError,
    StoreSerializeError,
    StoreWriteError,
)

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT", bound=BaseModel)
StoreT = TypeVar("StoreT", bound="JsonStore")


class JsonStore(Generic[StateT]):
    """
    Владелец одного файла состояния.

    Изменения делаются только внутри transaction(): блокировка держится
    от изменения до сохранения, поэтому два писателя не теряют обновления.
    """

    filename: ClassVar[str]
    state_type: ClassVar[type[BaseModel]]

    def __init__(self, state: StateT, path: Path):
        self.state = state
        self.path = path
        self._lock = threading.RLock()

    @classmethod
    def load(cls: type[StoreT], path: Optional[Path] = None) -> StoreT:
        """
        Загрузка при старте.

        Если файла нет - создаёт и сразу сохраняет значение по умолчанию.
        """
        path = path or data_path(cls.filename)
        try:
            file = open(path, "r", encoding="utf-8")
        except FileNotFoundError:
            store = cls(cls.state_type(), path)
            logger.debug("The next save is a default save")
            store.save()
            logger.info(f"✅ Created default {path.name}")
            return store
        except PermissionError as e:
            raise StoreOpenError(path, "permission denied when opening file", code="STORE_OPEN") from e
        except OSError as e:
            raise StoreOpenError(path, f"unable to open file: {e}", code="STORE_OPEN") from e

        with file:
            try:
                contents = file.read()
            except (OSError, UnicodeDecodeError) as e:
                raise StoreReadError(path, f"unable to read file contents: {e}", code="STORE_READ") from e

        try:
            state = cls.state_type.model_validate_json(contents)
        except ValidationError as e:
            raise StoreCorruptedError(path, f"invalid content: {e}", code="STORE_CORRUPTED") from e

        logger.info(f"✅ Loaded {path.name}")
        return cls(state, path)

    def save(self) -> None:
        """Сохраняет состояние целиком."""
        with self._lock:
            try:
                contents = self.state.model_dump_json(indent=2)
            except (TypeError, ValueError) as e:
                raise StoreSerializeError(
                    self.path, f"unable to serialize, this should never occur: {e}", code="STORE_SERIALIZE"
                ) from e

            try:
                file = open(self.path, "w", encoding="utf-8")
            except OSError as e:
                raise StoreCreateError(self.path, f"unable to open for writing: {e}", code="STORE_CREATE") from e

            try:
                with file:
                    file.write(contents)
            except OSError as e:
                raise StoreWriteError(self.path, f"unable to write data: {e}", code="STORE_WRITE") from e

        logger.debug(f"Saved {self.path.name}")

    @contextmanager
    def transaction(self) -> Iterator[StateT]:
        """
        Даёт состояние на изменение и сохраняет его после блока.

        Если блок упал, состояние в памяти откатывается к снимку.
        """
        with self._lock:
            snapshot = self.state.model_copy(deep=True)
            try:
                yield self.state
            except BaseException:
                self.state = snapshot
                raise
            self.save()
