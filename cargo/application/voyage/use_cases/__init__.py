from .create_voyage_use_case import CreateVoyageUseCase, MovementInput
from .reschedule_departure_use_case import RescheduleDepartureUseCase

__all__ = [
    "CreateVoyageUseCase",
    "MovementInput",
    "RescheduleDepartureUseCase",
]
