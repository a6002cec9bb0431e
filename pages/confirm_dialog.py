from typing import Optional
from wrappers.element_adapter import ElementAdapter


class ConfirmDialog(ElementAdapter):
    """Modal asking the user to confirm a destructive action, with an optional reason."""

    def confirm(self, reason: Optional[str] = None):
        if reason is not None:
            self.find("select[name='reason']").select_option(reason)
        self.find("button.confirm").click()

    def cancel(self):
        self.find("button.cancel").click()
