"""Page object for the login screen."""

from saucesuite.models.shop_models import Credentials
from saucesuite.pages.base_page import BasePage


class LoginPage(BasePage):
    """Login form at the store root."""

    PATH = ""

    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button"
    ERROR_MESSAGE = ".error-message-container"

    async def is_loaded(self) -> bool:
        return await self.session.is_visible(self.LOGIN_BUTTON)

    async def login(self, username: str, password: str) -> None:
        """Submit the login form.

        Args:
            username: The username
            password: The password
        """
        await self.session.fill(self.USERNAME_INPUT, username)
        await self.session.fill(self.PASSWORD_INPUT, password)
        await self.session.click(self.LOGIN_BUTTON)
        await self.session.wait_for_navigation()

    async def login_as(self, credentials: Credentials) -> None:
        await self.login(credentials.username, credentials.password)

    async def get_error_message(self) -> str:
        return await self.session.get_text(self.ERROR_MESSAGE)

    async def is_error_displayed(self) -> bool:
        return await self.session.is_visible(self.ERROR_MESSAGE)

    async def take_login_screenshot(self, name: str = "login-page") -> str:
        return await self.capture(name)
