# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from msrest.serialization import Model


class CloudToDeviceMethodRequest(Model):
    """Parameters to execute a direct method on a device or module.

    :param method_name: The name of the method to execute.
    :type method_name: str
    :param payload: The JSON-formatted direct method payload, up to 128kb in size.
    :type payload: object
    :param response_timeout_in_seconds: The timeout in seconds to wait for the method result.
    :type response_timeout_in_seconds: int
    :param connect_timeout_in_seconds: The timeout in seconds to wait for the device to
     connect.
    :type connect_timeout_in_seconds: int
    """

    _attribute_map = {
        "method_name": {"key": "methodName", "type": "str"},
        "payload": {"key": "payload", "type": "object"},
        "response_timeout_in_seconds": {"key": "responseTimeoutInSeconds", "type": "int"},
        "connect_timeout_in_seconds": {"key": "connectTimeoutInSeconds", "type": "int"},
    }

    def __init__(
        self,
        *,
        method_name=None,
        payload=None,
        response_timeout_in_seconds=None,
        connect_timeout_in_seconds=None,
        **kwargs
    ):
        super(CloudToDeviceMethodRequest, self).__init__(**kwargs)
        self.method_name = method_name
        self.payload = payload
        self.response_timeout_in_seconds = response_timeout_in_seconds
        self.connect_timeout_in_seconds = connect_timeout_in_seconds


class CloudToDeviceMethodResult(Model):
    """The device or module method invocation result.

    :param status: The status of the execution.
    :type status: int
    :param payload: The payload returned by the device or module.
    :type payload: object
    """

    _attribute_map = {
        "status": {"key": "status", "type": "int"},
        "payload": {"key": "payload", "type": "object"},
    }

    def __init__(self, *, status=None, payload=None, **kwargs):
        super(CloudToDeviceMethodResult, self).__init__(**kwargs)
        self.status = status
        self.payload = payload
