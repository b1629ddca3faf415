import logging
from typing import Optional
from mindat_api.security.masker import SensitiveDataMasker


class MaskingFilter(logging.Filter):
    def __init__(self, masker: Optional[SensitiveDataMasker] = None):
        """
        Logging filter that masks API tokens in log records. The package initializer attaches
        this filter to the `mindat_api` logger on import, so it rarely needs to be applied directly.

        Args:
            masker (SensitiveDataMasker): The implementation responsible for masking text matching patterns

        This class can otherwise be added to other loggers with minimal effort:
            >>> import logging
            >>> from mindat_api.security import MaskingFilter
            >>> logger = logging.getLogger('security_logger')
            >>> logger.addFilter(MaskingFilter())
            >>> logger.info("Sending with header Authorization: Token my-secret-token")
            # OUTPUT: Sending with header Authorization: Token ***
        """
        super().__init__()
        self.masker = masker or SensitiveDataMasker()

    def filter(self, record) -> bool:
        """
        Masks the message and its string arguments in place. Always returns True so that
        no record is dropped.
        """
        if record.args:
            if isinstance(record.args, dict):
                record.args = {key: self.masker.mask_text(value) for key, value in record.args.items()}
            else:
                record.args = tuple(self.masker.mask_text(arg) if isinstance(arg, str) else arg for arg in record.args)
        if isinstance(record.msg, str):
            record.msg = self.masker.mask_text(record.msg)
        return True
