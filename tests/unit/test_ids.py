import uuid

from movie_catalog.utils.ids import generate_id

def test_generate_id_is_uuid_string():
    value = generate_id()
    assert value != ""
    assert str(uuid.UUID(value)) == value

def test_generate_id_is_unique():
    ids = {generate_id() for _ in range(1000)}
    assert len(ids) == 1000
