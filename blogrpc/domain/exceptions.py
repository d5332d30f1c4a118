class DomainError(Exception):
    """Base class for domain-level exceptions."""


class UnhandledCommand(DomainError):
    pass


class DecodeFault(DomainError):
    """
    A request that could not be turned into a command.

    ``code`` is the stable two-digit fault code clients rely on.
    """

    code = "00"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def fault_code(self) -> int:
        return int(self.code)


class MalformedPayload(DecodeFault):
    code = "01"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid XMLRPC Request. ({detail})")
        self.detail = detail


class UnknownMethod(DecodeFault):
    code = "02"

    def __init__(self, method: str) -> None:
        super().__init__(f"Unknown Method. ({method})")
        self.method = method


class MissingParameter(DecodeFault):
    code = "03"

    def __init__(self, method: str, index: int) -> None:
        super().__init__(f"Parameter {index} of {method} not sent.")
        self.method = method
        self.index = index


class InvalidParameter(DecodeFault):
    code = "04"

    def __init__(self, method: str, index: int, reason: str) -> None:
        super().__init__(f"Parameter {index} of {method} is invalid: {reason}.")
        self.method = method
        self.index = index
        self.reason = reason


class MissingRequiredField(DecodeFault):
    codes = {"Post": "05", "Page": "06"}

    def __init__(self, struct_kind: str, field_name: str) -> None:
        self.struct_kind = struct_kind
        self.field_name = field_name
        self.code = self.codes[struct_kind]
        super().__init__(f"{struct_kind} Struct Element, {field_name.capitalize()}, not Sent.")

    @property
    def label(self) -> str:
        return f"{self.struct_kind}.{self.field_name}"
