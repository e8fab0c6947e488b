from pantry.application.commands.create_food_command import CreateFoodCommand
from pantry.application.commands.create_user_command import CreateUserCommand

__all__ = [
    "CreateFoodCommand",
    "CreateUserCommand",
]
