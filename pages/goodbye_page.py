from wrappers.page_object import PageObject


class GoodbyePage(PageObject):
    url = "/goodbye"

    def reason_text(self) -> str:
        element = self.find("#reason")
        self.driver.wait_until(lambda: element.text != "")
        return element.text
