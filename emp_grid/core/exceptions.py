class EmpGridError(Exception):
    """Base exception for all emp_grid errors"""
    pass

class ConfigError(EmpGridError):
    """Invalid or inconsistent global.json"""
    pass

class DatasetSchemaError(EmpGridError):
    """
    Dataset file doesn't match what Record/EmployeeDataset expects
    missing "employees" list, records without required keys, etc
    """
    pass

class ColumnConfigError(EmpGridError):
    """A ColumnSpec references a field that Record does not have"""
    pass
