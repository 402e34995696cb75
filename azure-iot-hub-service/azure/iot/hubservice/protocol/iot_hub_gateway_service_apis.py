# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from msrest.service_client import SDKClient
from msrest import Configuration, Serializer, Deserializer

from ..constant import VERSION, IOTHUB_API_VERSION
from .operations import DevicesOperations
from .operations import ModulesOperations
from .operations import JobsOperations
from .operations import BulkRegistryOperations
from . import models


class IotHubGatewayServiceAPIsConfiguration(Configuration):
    """Configuration for IotHubGatewayServiceAPIs
    Note that all parameters used to create this instance are saved as instance
    attributes.

    :param credentials: Subscription credentials which uniquely identify
     client subscription.
    :type credentials: None
    :param str base_url: Service URL
    :param str api_version: The IoT Hub REST api-version
    """

    def __init__(self, credentials, base_url=None, api_version=IOTHUB_API_VERSION):

        if credentials is None:
            raise ValueError("Parameter 'credentials' must not be None.")
        if not base_url:
            raise ValueError("Parameter 'base_url' must not be empty.")

        super(IotHubGatewayServiceAPIsConfiguration, self).__init__(base_url)

        self.add_user_agent("iothubgatewayserviceapis/{}".format(VERSION))

        self.credentials = credentials
        self.api_version = api_version


class IotHubGatewayServiceAPIs(SDKClient):
    """IotHubGatewayServiceAPIs

    :ivar config: Configuration for client.
    :vartype config: IotHubGatewayServiceAPIsConfiguration

    :ivar devices: Devices operations
    :vartype devices: azure.iot.hubservice.protocol.operations.DevicesOperations
    :ivar modules: Modules operations
    :vartype modules: azure.iot.hubservice.protocol.operations.ModulesOperations
    :ivar jobs: Jobs operations
    :vartype jobs: azure.iot.hubservice.protocol.operations.JobsOperations
    :ivar bulk_registry: BulkRegistry operations
    :vartype bulk_registry: azure.iot.hubservice.protocol.operations.BulkRegistryOperations

    :param credentials: Subscription credentials which uniquely identify
     client subscription.
    :type credentials: None
    :param str base_url: Service URL
    :param str api_version: The IoT Hub REST api-version
    """

    def __init__(self, credentials, base_url=None, api_version=IOTHUB_API_VERSION):

        self.config = IotHubGatewayServiceAPIsConfiguration(credentials, base_url, api_version)
        super(IotHubGatewayServiceAPIs, self).__init__(self.config.credentials, self.config)

        client_models = {k: v for k, v in models.__dict__.items() if isinstance(v, type)}
        self.api_version = api_version
        self._serialize = Serializer(client_models)
        self._deserialize = Deserializer(client_models)

        self.devices = DevicesOperations(
            self._client, self.config, self._serialize, self._deserialize
        )
        self.modules = ModulesOperations(
            self._client, self.config, self._serialize, self._deserialize
        )
        self.jobs = JobsOperations(self._client, self.config, self._serialize, self._deserialize)
        self.bulk_registry = BulkRegistryOperations(
            self._client, self.config, self._serialize, self._deserialize
        )
