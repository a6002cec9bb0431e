from wrappers.field_set import FieldSet
from wrappers.page_object import PageObject


class SignUpPage(PageObject):
    url = "/sign_up"

    def __init__(self, driver, config: dict = None):
        super().__init__(driver, config)

        # Fields
        self.form = FieldSet(self, {
            "email": "#email",
            "password": "label=Password",
            "country": "#country",
            "interests": "#interests",
            "newsletter": "#newsletter",
        })

    def sign_up(self, **values):
        self.visit()
        self.form.fill_in(values)
        self.submit_form()

    def submit_form(self):
        self.find("#sign_up_button").click()
