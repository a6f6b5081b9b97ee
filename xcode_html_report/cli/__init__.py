from .controller import ExitCode, run_step

__all__ = ["ExitCode", "run_step"]
