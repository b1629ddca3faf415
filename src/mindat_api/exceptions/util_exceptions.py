## util_exceptions.py

class LogDirectoryError(Exception):
    """Exception class raised for errors related to the creation of the package logging directory"""
    pass

class SessionCreationError(Exception):
    """Exception class raised for invalid operations in the creation of session objects"""
    pass
