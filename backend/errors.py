# errors.py
class FactsError(Exception):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidRequest(FactsError):
    pass


class Unauthorized(FactsError):
    def __init__(self, detail: str = "X-Token header invalid"):
        super().__init__(detail)


class DuplicateFact(FactsError):
    def __init__(self, detail: str = "Fact already existed"):
        super().__init__(detail)


class StoreUnavailable(FactsError):
    # the real cause goes to the log, clients only see this
    status_code = 503

    def __init__(self, detail: str = "Fact store unavailable"):
        super().__init__(detail)
