"""
Property-based tests for permission resolution and folder aggregation.

Uses Hypothesis to generate random folder forests built through
``create_folder`` and checks the resolver and aggregator against a
plain in-memory model of the same forest.
"""

from contextlib import contextmanager

from hypothesis import given, settings, HealthCheck
from hypothesis import strategies as st
from sqlalchemy.orm import sessionmaker

from video_vault.database import Base
from video_vault.models import UserRole, Video
from video_vault.schemas.folder import FolderCreate
from video_vault.services.caller import CallerContext
from video_vault.services.folder_contents import get_folder_contents
from video_vault.services.folder_lifecycle import create_folder, delete_folder_recursively
from video_vault.services.permission_resolver import (
    grant_editors,
    has_permission,
    iter_ancestry,
    revoke_editors,
)

from conftest import create_user, new_test_engine


PROPERTY_SETTINGS = settings(
    max_examples=30,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)


@contextmanager
def fresh_session():
    """Session on a brand-new in-memory database, dropped afterwards."""
    engine = new_test_engine()
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


# ---------------------------------------------------------------------------
# Hypothesis strategies
# ---------------------------------------------------------------------------

@st.composite
def parent_indexes(draw: st.DrawFn, min_size: int = 1, max_size: int = 12):
    """
    Generate a forest as a list of parent indexes.

    Entry ``i`` is None (root) or the index of an earlier folder, so every
    parent exists and no cycle can form.
    """
    n = draw(st.integers(min_value=min_size, max_value=max_size))
    parents: list = []
    for i in range(n):
        if i == 0:
            parents.append(None)
        else:
            parents.append(draw(st.one_of(st.none(), st.integers(min_value=0, max_value=i - 1))))
    return parents


def _build_forest(db, caller, parents):
    folders = []
    for i, parent in enumerate(parents):
        data = FolderCreate(
            name=f"Folder-{i}",
            parent_folder_id=folders[parent].id if parent is not None else None,
        )
        folders.append(create_folder(db, data, caller))
    return folders


def _ancestor_indexes(parents, index):
    """Indexes of ``index`` and all its ancestors in the model forest."""
    chain = []
    current = index
    while current is not None:
        chain.append(current)
        current = parents[current]
    return chain


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

@PROPERTY_SETTINGS
@given(parents=parent_indexes())
def test_ancestor_walk_is_bounded_by_depth(parents):
    """The walk visits exactly depth + 1 folders, from the folder up to its root."""
    with fresh_session() as db:
        admin = create_user(db, UserRole.ADMIN)
        folders = _build_forest(db, CallerContext.from_user(admin), parents)

        for index, folder in enumerate(folders):
            expected = [folders[i].id for i in _ancestor_indexes(parents, index)]
            assert [f.id for f in iter_ancestry(db, folder.id)] == expected


@PROPERTY_SETTINGS
@given(data=st.data(), parents=parent_indexes())
def test_grant_applies_to_subtree_only(data, parents):
    """An editor grant holds on the granted folder and its descendants and nowhere else."""
    granted = data.draw(st.integers(min_value=0, max_value=len(parents) - 1), label="granted")

    with fresh_session() as db:
        admin = create_user(db, UserRole.ADMIN)
        user = create_user(db)
        folders = _build_forest(db, CallerContext.from_user(admin), parents)

        grant_editors(db, [user.id], admin.id, folders[granted].id)
        db.commit()

        for index, folder in enumerate(folders):
            expected = granted in _ancestor_indexes(parents, index)
            assert has_permission(db, user.id, folder.id) is expected


@PROPERTY_SETTINGS
@given(data=st.data(), parents=parent_indexes(), copies=st.integers(min_value=1, max_value=3))
def test_revoke_undoes_grant(data, parents, copies):
    """Granting (possibly repeatedly) then revoking on the same folder leaves no permission."""
    granted = data.draw(st.integers(min_value=0, max_value=len(parents) - 1), label="granted")

    with fresh_session() as db:
        admin = create_user(db, UserRole.ADMIN)
        user = create_user(db)
        folders = _build_forest(db, CallerContext.from_user(admin), parents)

        grant_editors(db, [user.id] * copies, admin.id, folders[granted].id)
        assert revoke_editors(db, [user.id], folders[granted].id) == copies
        db.commit()

        for folder in folders:
            assert has_permission(db, user.id, folder.id) is False


@PROPERTY_SETTINGS
@given(data=st.data(), parents=parent_indexes(min_size=2))
def test_cascade_delete_clears_subtree(data, parents):
    """After a cascade delete no folder in the subtree is listed and no video in it is active."""
    target = data.draw(st.integers(min_value=0, max_value=len(parents) - 1), label="target")
    video_folders = data.draw(
        st.lists(st.integers(min_value=0, max_value=len(parents) - 1), max_size=8),
        label="video_folders",
    )

    with fresh_session() as db:
        admin = create_user(db, UserRole.ADMIN)
        folders = _build_forest(db, CallerContext.from_user(admin), parents)
        videos = []
        for i, folder_index in enumerate(video_folders):
            video = Video(
                folder_id=folders[folder_index].id,
                title=f"Video-{i}",
                s3_key=f"videos/{i}.mp4",
                created_by_user_id=admin.id,
            )
            db.add(video)
            videos.append((folder_index, video))
        db.commit()

        delete_folder_recursively(db, folders[target].id)

        in_subtree = {
            index for index in range(len(parents))
            if target in _ancestor_indexes(parents, index)
        }
        for index, folder in enumerate(folders):
            db.refresh(folder)
            assert folder.is_deleted is (index in in_subtree)

        for folder_index, video in videos:
            db.refresh(video)
            if folder_index in in_subtree:
                assert video.is_active is False
                assert video.folder_id is None
            else:
                assert video.is_active is True
                assert video.folder_id == folders[folder_index].id

        for index in range(len(parents)):
            if index in in_subtree:
                continue
            listed = {c["id"] for c in get_folder_contents(db, folders[index].id)["child_folders"]}
            assert listed.isdisjoint({folders[i].id for i in in_subtree})


@PROPERTY_SETTINGS
@given(orders=st.lists(st.one_of(st.none(), st.integers(min_value=-50, max_value=50)), min_size=1, max_size=10))
def test_child_folders_sorted_with_unset_order_last(orders):
    with fresh_session() as db:
        admin = create_user(db, UserRole.ADMIN)
        caller = CallerContext.from_user(admin)
        parent = create_folder(db, FolderCreate(name="Parent"), caller)
        for i, order in enumerate(orders):
            create_folder(
                db,
                FolderCreate(name=f"Child-{i}", parent_folder_id=parent.id, display_order=order),
                caller,
            )

        listed = [c["display_order"] for c in get_folder_contents(db, parent.id)["child_folders"]]
        set_orders = sorted(o for o in orders if o is not None)
        assert listed == set_orders + [None] * (len(orders) - len(set_orders))
