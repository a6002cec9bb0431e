from typing import Optional
from pages.confirm_dialog import ConfirmDialog
from wrappers.page_object import PageObject


class AccountPage(PageObject):
    url = "/account"

    # Email is rendered by a script once the page is parsed
    def email_text(self) -> str:
        element = self.find("#account_email")
        self.driver.wait_until(lambda: element.text != "")
        return element.text

    def delete_account(self, reason: Optional[str] = None):
        self.find("#delete_account").click()
        ConfirmDialog(self, "#confirm_dialog").confirm(reason)
