# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the client for the import and export jobs of the IoT Hub identity
registry.
"""

import logging
from .constant import DEFAULT_JOB_BLOB_NAME
from .exceptions import handle_service_errors
from .client_utils import ensure_identifier
from .protocol.models import JobProperties, JobType, StorageAuthenticationType

logger = logging.getLogger(__name__)


def _resolve_options(options):
    blob_name = DEFAULT_JOB_BLOB_NAME
    authentication_type = StorageAuthenticationType.key_based
    if options is not None:
        if options.blob_name:
            blob_name = options.blob_name
        if options.authentication_type:
            authentication_type = options.authentication_type
    return blob_name, authentication_type


class JobsClient(object):
    """Convenience APIs for import and export jobs.

    Creating a job only submits it. IoT Hub runs the job in the background; use
    get_import_export_job to follow its status.

    Users should not instantiate this class directly. Use the ``jobs`` attribute of an
    :class:`azure.iot.hubservice.IoTHubServiceClient` instead.
    """

    def __init__(self, protocol):
        self._protocol = protocol

    @handle_service_errors
    def create_export_devices_job(self, output_blob_container_uri, exclude_keys, options=None):
        """Creates a job that exports the device registry to a blob container.

        :param str output_blob_container_uri: The URI, including a SAS token when key based
            authentication is used, of the container the registry is exported to.
        :param bool exclude_keys: Whether the authorization keys are left out of the export.
        :param options: Blob name and storage authentication type. Unset values default to
            "devices.txt" and key based authentication.
        :type options: :class:`azure.iot.hubservice.models.JobRequestOptions`

        :returns: The JobProperties of the submitted job.
        """
        ensure_identifier("output_blob_container_uri", output_blob_container_uri)
        blob_name, authentication_type = _resolve_options(options)

        job_properties = JobProperties(
            type=JobType.export,
            output_blob_container_uri=output_blob_container_uri,
            output_blob_name=blob_name,
            exclude_keys_in_export=bool(exclude_keys),
            storage_authentication_type=authentication_type,
        )
        logger.info("Creating export job to blob {}".format(blob_name))
        return self._protocol.jobs.create_import_export_job(job_properties)

    @handle_service_errors
    def create_import_devices_job(
        self, import_blob_container_uri, output_blob_container_uri, options=None
    ):
        """Creates a job that imports device identities from a blob container.

        :param str import_blob_container_uri: The URI of the container holding the blob to
            import.
        :param str output_blob_container_uri: The URI of the container the job writes its
            results and errors to.
        :param options: Blob name and storage authentication type. Unset values default to
            "devices.txt" and key based authentication.
        :type options: :class:`azure.iot.hubservice.models.JobRequestOptions`

        :returns: The JobProperties of the submitted job.
        """
        ensure_identifier("import_blob_container_uri", import_blob_container_uri)
        ensure_identifier("output_blob_container_uri", output_blob_container_uri)
        blob_name, authentication_type = _resolve_options(options)

        job_properties = JobProperties(
            type=JobType.import_enum,
            input_blob_container_uri=import_blob_container_uri,
            input_blob_name=blob_name,
            output_blob_container_uri=output_blob_container_uri,
            storage_authentication_type=authentication_type,
        )
        logger.info("Creating import job from blob {}".format(blob_name))
        return self._protocol.jobs.create_import_export_job(job_properties)

    @handle_service_errors
    def get_import_export_job(self, job_id):
        """Retrieves the status of an import or export job.

        :param str job_id: The id of the job.

        :returns: The JobProperties of the job.
        """
        ensure_identifier("job_id", job_id)
        logger.info("Getting job {}".format(job_id))
        return self._protocol.jobs.get_import_export_job(job_id)

    @handle_service_errors
    def get_import_export_jobs(self):
        """Retrieves the status of all import and export jobs.

        :returns: A list of JobProperties.
        """
        logger.info("Getting all import and export jobs")
        return self._protocol.jobs.get_import_export_jobs()

    @handle_service_errors
    def cancel_import_export_job(self, job_id):
        """Cancels an import or export job.

        :param str job_id: The id of the job.

        :returns: The body returned by the service, or None if it returned none.
        """
        ensure_identifier("job_id", job_id)
        logger.info("Cancelling job {}".format(job_id))
        return self._protocol.jobs.cancel_import_export_job(job_id)
