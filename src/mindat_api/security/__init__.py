from mindat_api.security.utils import SecretUtils
from mindat_api.security.masker import SensitiveDataMasker
from mindat_api.security.filters import MaskingFilter


__all__ = ['SecretUtils', 'SensitiveDataMasker', 'MaskingFilter']
