# Services package

from .caller import CallerContext
from .permission_resolver import (
    can_edit_folder,
    diff_editor_ids,
    grant_editors,
    has_permission,
    iter_ancestry,
    list_editors,
    revoke_editors,
)
from .folder_contents import (
    get_folder,
    get_folder_contents,
    get_folder_path,
    get_root_folders,
    has_content,
)
from .folder_lifecycle import (
    create_folder,
    delete_folder,
    delete_folder_recursively,
    update_folder,
)
from .video_service import (
    deactivate_video,
    get_total_views,
    get_video_view,
    record_view,
    remove_video_view,
)

__all__ = [
    "CallerContext",
    "can_edit_folder",
    "diff_editor_ids",
    "grant_editors",
    "has_permission",
    "iter_ancestry",
    "list_editors",
    "revoke_editors",
    "get_folder",
    "get_folder_contents",
    "get_folder_path",
    "get_root_folders",
    "has_content",
    "create_folder",
    "delete_folder",
    "delete_folder_recursively",
    "update_folder",
    "deactivate_video",
    "record_view",
    "get_video_view",
    "remove_video_view",
    "get_total_views",
]
