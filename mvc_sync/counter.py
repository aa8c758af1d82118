"""
Counter MVC: the smallest model/view/controller triple, with no remote.
"""
from __future__ import annotations
import logging
from typing import Protocol


class Counter:
    def __init__(self, count: int = 0):
        self._count = count

    def get(self) -> int:
        return self._count

    def increment(self) -> None:
        self._count += 1

    def decrement(self) -> None:
        if self._count > 0: self._count -= 1


class CounterView(Protocol):
    def render(self, value: int) -> None: ...


class LoggerCounterView:
    def __init__(self, logger_name: str = "mvc_sync.counter"):
        self.log = logging.getLogger(logger_name)

    def render(self, value: int) -> None:
        self.log.info("%d", value)


class CounterController:
    def __init__(self, model: Counter, view: CounterView):
        self.model = model
        self.view = view

    def get(self) -> None:
        self.view.render(self.model.get())

    def increment(self) -> None:
        self.model.increment()
        self.view.render(self.model.get())

    def decrement(self) -> None:
        self.model.decrement()
        self.view.render(self.model.get())
