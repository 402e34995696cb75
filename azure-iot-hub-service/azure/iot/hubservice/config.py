# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import logging
from . import constant
from . import product_info as product_info_module

logger = logging.getLogger(__name__)


class IoTHubServiceClientConfig(object):
    """Stores the options shared by the clients of the Azure IoT Hub service library.
    """

    def __init__(
        self,
        hostname,
        api_version=constant.IOTHUB_API_VERSION,
        timeout=constant.DEFAULT_HTTP_TIMEOUT,
        product_info="",
    ):
        """Initializer for IoTHubServiceClientConfig

        :param str hostname: The hostname of the IoT Hub being connected to
        :param str api_version: The IoT Hub REST api-version sent with every request
        :param timeout: Connection timeout for every request, in seconds
        :type timeout: int or float
        :param str product_info: Suffix appended to the user agent string
        """
        if not hostname:
            raise ValueError("A hostname must be provided")
        self.hostname = hostname
        self.api_version = self._sanitize_api_version(api_version)
        self.timeout = self._rectify_timeout(timeout)
        self.product_info = self._sanitize_product_info(product_info)

    @property
    def user_agent(self):
        return product_info_module.get_iothub_service_user_agent(self.product_info)

    def apply(self, protocol):
        """Push these options into an msrest based protocol client"""
        protocol.config.api_version = self.api_version
        protocol.config.connection.timeout = self.timeout
        protocol.config.add_user_agent(self.user_agent)

    @staticmethod
    def _sanitize_api_version(api_version):
        if not isinstance(api_version, str) or not api_version:
            raise TypeError("Invalid type for 'api_version'. Permissible type is a non-empty str.")
        return api_version

    @staticmethod
    def _sanitize_product_info(product_info):
        if product_info is None:
            return ""
        if not isinstance(product_info, str):
            raise TypeError("Invalid type for 'product_info'. Permissible type is str.")
        return product_info

    @staticmethod
    def _rectify_timeout(timeout):
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise TypeError("Invalid type for 'timeout'. Permissible types are number.")

        if timeout <= 0:
            logger.error(
                "'timeout' can not be zero or negative. A default value of {} seconds will be used.".format(
                    constant.DEFAULT_HTTP_TIMEOUT
                )
            )
            timeout = constant.DEFAULT_HTTP_TIMEOUT

        return timeout
