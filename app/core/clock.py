import time
from typing import Protocol


class Clock(Protocol):
    """Источник текущего времени (миллисекунды Unix epoch)"""

    def now_ms(self) -> int:
        ...


class SystemClock:
    """Системные часы"""

    def now_ms(self) -> int:
        return int(time.time() * 1000)


system_clock = SystemClock()


# Функция для dependency injection в FastAPI
def get_clock() -> Clock:
    return system_clock
