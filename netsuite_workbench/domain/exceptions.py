class WorkbenchError(Exception):
    pass


class UnknownRecordTypeError(WorkbenchError, ValueError):
    pass
