"""Page objects for the User Inyerface game."""

from inyerface.pages.avatar_and_interests_form import AvatarAndInterestsForm
from inyerface.pages.cookies_form import CookiesForm
from inyerface.pages.game_page import GamePage
from inyerface.pages.help_form import HelpForm
from inyerface.pages.login_form import LoginForm
from inyerface.pages.start_page import StartPage

__all__ = [
    "AvatarAndInterestsForm",
    "CookiesForm",
    "GamePage",
    "HelpForm",
    "LoginForm",
    "StartPage",
]
