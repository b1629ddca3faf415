from mindat_api.exceptions.api_exceptions import (ErrorKind, MindatAPIException, RequestFailedException,
                                                  InvalidURLException, UpstreamAPIException,
                                                  ResponseDecodeException, AuthenticationRequiredException,
                                                  RateLimitExceededException, NotFoundException,
                                                  InvalidParameterException, APIParameterException)

from mindat_api.exceptions.util_exceptions import LogDirectoryError, SessionCreationError

from mindat_api.exceptions.command_exceptions import CommandError

__all__ = ["ErrorKind", "MindatAPIException", "RequestFailedException", "InvalidURLException",
           "UpstreamAPIException", "ResponseDecodeException", "AuthenticationRequiredException",
           "RateLimitExceededException", "NotFoundException", "InvalidParameterException",
           "APIParameterException", "LogDirectoryError", "SessionCreationError", "CommandError"]
