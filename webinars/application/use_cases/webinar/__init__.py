from .change_seats import ChangeSeatsCommand, ChangeSeatsUseCase

__all__ = ["ChangeSeatsCommand", "ChangeSeatsUseCase"]
