from .progress_tracker import ProgressCallbacks, ProgressState, ProgressTracker

__all__ = ["ProgressCallbacks", "ProgressState", "ProgressTracker"]
