"""Page renderers for Thirty."""

from thirty.ui.views.home import render_home_page
from thirty.ui.views.game import render_game_page
from thirty.ui.views.score_table import render_score_table_page

__all__ = ["render_home_page", "render_game_page", "render_score_table_page"]
