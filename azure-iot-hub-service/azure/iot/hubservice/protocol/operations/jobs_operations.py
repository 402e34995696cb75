# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from .operations_base import OperationsBase


class JobsOperations(OperationsBase):
    """JobsOperations operations for import/export jobs on the identity registry.

    :param client: Client for service requests.
    :param config: Configuration of service client.
    :param serializer: An object model serializer.
    :param deserializer: An object model deserializer.
    """

    def create_import_export_job(self, job_properties, custom_headers=None, raw=False, **operation_config):
        """Creates a new import or export job on the IoT Hub.

        :param job_properties: The job specifications.
        :type job_properties: ~azure.iot.hubservice.protocol.models.JobProperties
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: JobProperties or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.JobProperties or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.create_import_export_job.metadata["url"])
        body_content = self._serialize.body(job_properties, "JobProperties")
        request = self._client.post(
            url,
            self._query_parameters(),
            self._header_parameters(custom_headers, has_body=True),
            body_content,
        )
        return self._send(request, [200], "JobProperties", raw, **operation_config)

    create_import_export_job.metadata = {"url": "/jobs/create"}

    def get_import_export_jobs(self, custom_headers=None, raw=False, **operation_config):
        """Gets the status of all import and export jobs in the IoT Hub.

        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: list or ClientRawResponse if raw=true
        :rtype: list[~azure.iot.hubservice.protocol.models.JobProperties] or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.get_import_export_jobs.metadata["url"])
        request = self._client.get(
            url, self._query_parameters(), self._header_parameters(custom_headers)
        )
        return self._send(request, [200], "[JobProperties]", raw, **operation_config)

    get_import_export_jobs.metadata = {"url": "/jobs"}

    def get_import_export_job(self, id, custom_headers=None, raw=False, **operation_config):
        """Gets the status of an import or export job in the IoT Hub.

        :param id: The unique identifier of the job.
        :type id: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: JobProperties or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.JobProperties or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.get_import_export_job.metadata["url"], id=id)
        request = self._client.get(
            url, self._query_parameters(), self._header_parameters(custom_headers)
        )
        return self._send(request, [200], "JobProperties", raw, **operation_config)

    get_import_export_job.metadata = {"url": "/jobs/{id}"}

    def cancel_import_export_job(self, id, custom_headers=None, raw=False, **operation_config):
        """Cancels an import or export job in the IoT Hub.

        A 204 response carries no body and yields None.

        :param id: The unique identifier of the job.
        :type id: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: object or ClientRawResponse if raw=true
        :rtype: object or ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.cancel_import_export_job.metadata["url"], id=id)
        request = self._client.delete(
            url, self._query_parameters(), self._header_parameters(custom_headers)
        )
        return self._send(request, [200, 204], "object", raw, **operation_config)

    cancel_import_export_job.metadata = {"url": "/jobs/{id}"}
