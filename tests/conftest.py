from tests.fixtures.mindat_api import (base_url, api_token, test_masker, mindat_client, anonymous_client,
                                       mock_mindat, mindat_commands, country_json, countries_page_json,
                                       geomaterial_json, locality_json, localities_page_json)
from tests.fixtures.config import restore_config, restore_package_logger
