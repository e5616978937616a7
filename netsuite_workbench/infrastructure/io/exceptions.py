class WorkbenchInfrastructureError(Exception):
    pass


class DataSourceError(WorkbenchInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class DataValidationError(DataSourceError):
    pass


class ExportWriteError(WorkbenchInfrastructureError):
    pass
