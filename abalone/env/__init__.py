from .gym_env import AbaloneEnv, format_board

__all__ = ["AbaloneEnv", "format_board"]
