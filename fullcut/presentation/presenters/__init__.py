from .edit_presenter import EditPresenter

__all__ = ["EditPresenter"]
