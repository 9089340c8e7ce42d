"""
Parking events
==============

Observer Pattern - the lot administrator publishes events after every state
change; observers decide what to do with them.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

log = logging.getLogger(__name__)

VEHICLE_PARKED = "VEHICLE_PARKED"
VEHICLE_REMOVED = "VEHICLE_REMOVED"
PARKING_UNAVAILABLE = "PARKING_UNAVAILABLE"


class Observer(ABC):
    """Observer interface for the Observer Pattern"""

    @abstractmethod
    def update(self, event_type: str, message: str):
        pass


class ParkingEventNotifier:
    """Subject for Observer Pattern - manages observers and notifies them"""

    def __init__(self):
        self._observers: List[Observer] = []

    def attach(self, observer: Observer):
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer):
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event_type: str, message: str):
        for observer in list(self._observers):
            observer.update(event_type, message)


class LoggingObserver(Observer):
    """Concrete Observer - forwards events to the log"""

    def __init__(self, level: int = logging.INFO):
        self.level = level

    def update(self, event_type: str, message: str):
        log.log(self.level, "EVENT %s %s", event_type, message)


class ConsoleDisplay(Observer):
    """Concrete Observer - shows parking activity on the console"""

    def update(self, event_type: str, message: str):
        print(f"[Display] {message}")
