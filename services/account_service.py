from typing import Optional
from pages.account_page import AccountPage
from pages.goodbye_page import GoodbyePage
from pages.sign_up_page import SignUpPage


class AccountService:

    def __init__(self, driver, config: Optional[dict] = None):
        self.driver = driver
        self.config = config

    def register(self, email, password, country, interests=(), newsletter=False) -> AccountPage:
        sign_up_page = SignUpPage(self.driver, self.config)
        sign_up_page.sign_up(email=email, password=password, country=country,
                             interests=list(interests), newsletter=newsletter)

        account_page = AccountPage(self.driver, self.config)
        account_page.verify_arrival()
        return account_page

    def delete_account(self, reason: Optional[str] = None) -> GoodbyePage:
        account_page = AccountPage(self.driver, self.config)
        account_page.delete_account(reason)

        goodbye_page = GoodbyePage(self.driver, self.config)
        goodbye_page.verify_arrival()
        return goodbye_page
