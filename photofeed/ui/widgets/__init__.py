from photofeed.ui.widgets.thumbnail import ThumbnailWidget
from photofeed.ui.widgets.photo_card import PhotoCard
from photofeed.ui.widgets.results_view import ResultsView

__all__ = ["ThumbnailWidget", "PhotoCard", "ResultsView"]
