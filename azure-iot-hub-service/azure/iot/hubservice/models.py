# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module imports and re-exposes the contents of the .protocol.models
subpackage to be better exposed through the user API surface, along with the
request options that only exist on the client side
"""
from .protocol.models import *  # noqa: F401,F403
from .protocol.models import __all__ as _protocol_models_all
from .precondition import IfMatchPrecondition


class JobRequestOptions(object):
    """Optional settings for creating an import or export job.

    :ivar str blob_name: The name of the blob to import from or export to. When not set the
        service client uses "devices.txt".
    :ivar authentication_type: How IoT Hub authenticates against the storage account. When
        not set the service client uses key based authentication.
    :vartype authentication_type: str or :class:`StorageAuthenticationType`
    """

    def __init__(self, blob_name=None, authentication_type=None):
        self.blob_name = blob_name
        self.authentication_type = authentication_type


__all__ = list(_protocol_models_all) + ["IfMatchPrecondition", "JobRequestOptions"]
