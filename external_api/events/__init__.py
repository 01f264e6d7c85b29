"""Event integration layer.

Translates pipeline actions into serializable events for the host listener.

Flow: ActionPipeline → ExternalAPIBridge → HostDispatch
"""

from external_api.events.bridge import ExternalAPIBridge
from external_api.events.transforms import tag_label, to_error_string, to_url_string

__all__ = ["ExternalAPIBridge", "tag_label", "to_error_string", "to_url_string"]
