"""Service-layer errors"""


class TemplateNotFoundError(LookupError):
    def __init__(self, template_id: str):
        super().__init__(f"Template not found: {template_id}")
        self.template_id = template_id


class DraftNotFoundError(LookupError):
    def __init__(self, draft_id: str):
        super().__init__(f"Draft not found: {draft_id}")
        self.draft_id = draft_id


class ContractNotFoundError(LookupError):
    def __init__(self, contract_id: str):
        super().__init__(f"Contract not found: {contract_id}")
        self.contract_id = contract_id


class DraftConflictError(Exception):
    """A draft was saved by someone else since the caller read it"""

    def __init__(self, draft_id: str, expected_version: int, current_version: int):
        super().__init__(
            f"Draft {draft_id} is at version {current_version}, expected {expected_version}"
        )
        self.draft_id = draft_id
        self.expected_version = expected_version
        self.current_version = current_version


class FormValidationError(Exception):
    """Submitted form data failed validation; ``errors`` maps field id to message"""

    def __init__(self, errors: dict[str, str]):
        super().__init__(f"Form data is invalid ({len(errors)} field error(s))")
        self.errors = errors
