# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from .iot_hub_gateway_service_apis import IotHubGatewayServiceAPIs

__all__ = ["IotHubGatewayServiceAPIs"]
