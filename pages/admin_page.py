from wrappers.page_object import PageObject


class AdminPage(PageObject):
    url = "/admin"
    url_matcher = r"/admin(?:/\w+)*/?$"
    wait_timeout = 1000
