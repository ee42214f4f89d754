from uuid import uuid4

import pytest

from myflix.application.errors import (
    AlreadyFavoriteError,
    NotFoundError,
    UpstreamUnavailableError,
)
from myflix.application.identity.favorites import add_favorite, remove_favorite


@pytest.mark.asyncio
async def test_add_persists_membership(user_repo, movie_repo, alice, movie):
    user = await add_favorite(user_id=alice.id, movie_id=movie.id, user_repo=user_repo, movie_repo=movie_repo)
    assert user.favorites == {movie.id}
    assert user_repo.stored(alice.id).favorites == {movie.id}


@pytest.mark.asyncio
async def test_second_add_is_a_conflict(user_repo, movie_repo, alice, movie):
    await add_favorite(user_id=alice.id, movie_id=movie.id, user_repo=user_repo, movie_repo=movie_repo)
    with pytest.raises(AlreadyFavoriteError):
        await add_favorite(user_id=alice.id, movie_id=movie.id, user_repo=user_repo, movie_repo=movie_repo)
    assert user_repo.stored(alice.id).favorites == {movie.id}


@pytest.mark.asyncio
async def test_add_unknown_movie_is_not_found(user_repo, movie_repo, alice):
    with pytest.raises(NotFoundError, match="Movie"):
        await add_favorite(user_id=alice.id, movie_id=uuid4(), user_repo=user_repo, movie_repo=movie_repo)
    assert user_repo.save_calls == 0


@pytest.mark.asyncio
async def test_add_for_missing_user_is_not_found(user_repo, movie_repo, movie):
    with pytest.raises(NotFoundError, match="User"):
        await add_favorite(user_id=uuid4(), movie_id=movie.id, user_repo=user_repo, movie_repo=movie_repo)


@pytest.mark.asyncio
async def test_add_uses_current_persisted_state(user_repo, movie_repo, alice, movies):
    first, second = movies
    # alice as loaded before a concurrent request added `first`
    stale = user_repo.stored(alice.id)
    await add_favorite(user_id=alice.id, movie_id=first.id, user_repo=user_repo, movie_repo=movie_repo)

    user = await add_favorite(user_id=stale.id, movie_id=second.id, user_repo=user_repo, movie_repo=movie_repo)
    assert user.favorites == {first.id, second.id}


@pytest.mark.asyncio
async def test_remove_twice_succeeds(user_repo, movie_repo, alice, movie):
    await add_favorite(user_id=alice.id, movie_id=movie.id, user_repo=user_repo, movie_repo=movie_repo)

    user = await remove_favorite(user_id=alice.id, movie_id=movie.id, user_repo=user_repo)
    assert user.favorites == set()
    user = await remove_favorite(user_id=alice.id, movie_id=movie.id, user_repo=user_repo)
    assert user.favorites == set()
    assert user_repo.stored(alice.id).favorites == set()


@pytest.mark.asyncio
async def test_remove_absent_leaves_set_unchanged(user_repo, movie_repo, alice, movies):
    first, second = movies
    await add_favorite(user_id=alice.id, movie_id=first.id, user_repo=user_repo, movie_repo=movie_repo)

    user = await remove_favorite(user_id=alice.id, movie_id=second.id, user_repo=user_repo)
    assert user.favorites == {first.id}


@pytest.mark.asyncio
async def test_remove_reference_missing_from_catalog(user_repo, alice):
    # removal does not consult the catalog
    user = await remove_favorite(user_id=alice.id, movie_id=uuid4(), user_repo=user_repo)
    assert user.favorites == set()


@pytest.mark.asyncio
async def test_remove_for_missing_user_is_not_found(user_repo):
    with pytest.raises(NotFoundError):
        await remove_favorite(user_id=uuid4(), movie_id=uuid4(), user_repo=user_repo)


@pytest.mark.asyncio
async def test_failed_write_leaves_no_partial_mutation(user_repo, movie_repo, alice, movie):
    user_repo.fail_writes = True
    with pytest.raises(UpstreamUnavailableError):
        await add_favorite(user_id=alice.id, movie_id=movie.id, user_repo=user_repo, movie_repo=movie_repo)
    assert user_repo.stored(alice.id).favorites == set()
