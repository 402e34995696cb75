# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from msrest.pipeline import ClientRawResponse
from msrest.exceptions import HttpOperationError

from .. import models


class OperationsBase(object):
    """Shared plumbing for the operations groups.

    :param client: Client for service requests.
    :param config: Configuration of service client.
    :param serializer: An object model serializer.
    :param deserializer: An object model deserializer.
    """

    models = models

    def __init__(self, client, config, serializer, deserializer):

        self._client = client
        self._serialize = serializer
        self._deserialize = deserializer

        self.config = config

    def _format_url(self, url, **path_arguments):
        path_format_arguments = {
            key: self._serialize.url(key, value, "str") for key, value in path_arguments.items()
        }
        return self._client.format_url(url, **path_format_arguments)

    def _query_parameters(self):
        return {"api-version": self._serialize.query("api_version", self.config.api_version, "str")}

    def _header_parameters(self, custom_headers, if_match=None, has_body=False):
        header_parameters = {"Accept": "application/json"}
        if has_body:
            header_parameters["Content-Type"] = "application/json; charset=utf-8"
        if custom_headers:
            header_parameters.update(custom_headers)
        if if_match is not None:
            header_parameters["If-Match"] = self._serialize.header("if_match", if_match, "str")
        return header_parameters

    def _send(self, request, expected_status_codes, response_type, raw, **operation_config):
        response = self._client.send(request, stream=False, **operation_config)

        if response.status_code not in expected_status_codes:
            raise HttpOperationError(self._deserialize, response)

        deserialized = None
        if response_type is not None and response.status_code == 200:
            deserialized = self._deserialize(response_type, response)

        if raw:
            return ClientRawResponse(deserialized, response)

        return deserialized
