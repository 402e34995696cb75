# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the entry point client of the Azure IoT Hub service library."""

import logging
from .auth import ConnectionStringAuthentication, AzureIdentityCredentialAdapter
from .config import IoTHubServiceClientConfig
from .protocol import IotHubGatewayServiceAPIs as protocol_client
from .devices_client import DevicesClient
from .modules_client import ModulesClient
from .jobs_client import JobsClient

logger = logging.getLogger(__name__)


class IoTHubServiceClient(object):
    """The entry point for managing the identity registry of an IoT Hub.

    :ivar devices: Device identities, device twins and device direct methods.
    :vartype devices: :class:`azure.iot.hubservice.DevicesClient`
    :ivar modules: Module identities, module twins and module direct methods.
    :vartype modules: :class:`azure.iot.hubservice.ModulesClient`
    :ivar jobs: Import and export jobs.
    :vartype jobs: :class:`azure.iot.hubservice.JobsClient`
    """

    def __init__(self, credentials, config):
        """Initializer for an IoTHubServiceClient.

        Users should not call this directly. Rather, they should use the
        from_connection_string() or from_token_credential() factory methods.

        :param credentials: An msrest authentication object that signs every request.
        :param config: The options of the client.
        :type config: :class:`azure.iot.hubservice.config.IoTHubServiceClientConfig`
        """
        self.config = config
        self.protocol = protocol_client(
            credentials, "https://" + config.hostname, api_version=config.api_version
        )
        config.apply(self.protocol)

        self.devices = DevicesClient(self.protocol)
        self.modules = ModulesClient(self.protocol)
        self.jobs = JobsClient(self.protocol)

    @classmethod
    def from_connection_string(cls, connection_string, **kwargs):
        """Classmethod initializer for an IoTHubServiceClient.
        Creates the client from an IoT Hub connection string.

        :param str connection_string: The IoT Hub connection string, with a shared access
            policy allowed to read and write the registry.
        :param str api_version: The IoT Hub REST api-version. Optional.
        :param timeout: The connection timeout in seconds. Optional.
        :param str product_info: Suffix for the user agent string. Optional.

        :raises: ValueError if the connection string is invalid.

        :rtype: :class:`azure.iot.hubservice.IoTHubServiceClient`
        """
        credentials = ConnectionStringAuthentication(connection_string)
        config = IoTHubServiceClientConfig(credentials.host_name, **kwargs)
        logger.debug("Creating service client for {}".format(config.hostname))
        return cls(credentials, config)

    @classmethod
    def from_token_credential(cls, url, token_credential, **kwargs):
        """Classmethod initializer for an IoTHubServiceClient.
        Creates the client from the host name of the IoT Hub and an Azure token credential.

        :param str url: The host name of the IoT Hub.
        :param token_credential: The Azure token credential object
        :type token_credential: :class:`azure.core.credentials.TokenCredential`
        :param str api_version: The IoT Hub REST api-version. Optional.
        :param timeout: The connection timeout in seconds. Optional.
        :param str product_info: Suffix for the user agent string. Optional.

        :rtype: :class:`azure.iot.hubservice.IoTHubServiceClient`
        """
        if token_credential is None:
            raise ValueError("A token credential must be provided")
        config = IoTHubServiceClientConfig(url, **kwargs)
        logger.debug("Creating service client for {}".format(config.hostname))
        return cls(AzureIdentityCredentialAdapter(token_credential), config)
