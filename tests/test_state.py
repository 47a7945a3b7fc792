import pytest
from blueprints.signup.state import FieldStateStore, SignupInput


def test_store_starts_empty():
    store = FieldStateStore()
    assert store.snapshot() == SignupInput('', '', '', '')
    assert store.character_count == '0/1000 characters'


def test_set_field_updates_snapshot():
    store = FieldStateStore()
    before = store.snapshot()
    store.set_field('email', 'obrien@example.com')

    assert store.get_field('email') == 'obrien@example.com'
    assert store.snapshot().email == 'obrien@example.com'
    # Earlier snapshots are not affected by later edits
    assert before.email == ''


def test_unknown_field_is_rejected():
    store = FieldStateStore()
    with pytest.raises(KeyError):
        store.set_field('username', 'John')
    with pytest.raises(KeyError):
        store.touch('address')


def test_character_count_follows_message():
    store = FieldStateStore()
    store.set_field('message', 'Hello World')
    assert store.message_length == 11
    assert store.character_count == '11/1000 characters'


def test_reset_clears_values_and_touched_state():
    store = FieldStateStore()
    store.set_field('name', 'John Doe')
    store.touch('name')
    assert store.is_touched('name')

    store.reset()

    assert store.snapshot() == SignupInput()
    assert not store.is_touched('name')


def test_from_mapping_ignores_unknown_keys():
    store = FieldStateStore.from_mapping({'name': 'John Doe', 'phone': 1234567, 'csrf': 'x'})
    assert store.snapshot() == SignupInput(name='John Doe', phone='1234567')


def test_from_mapping_folds_crlf_line_breaks():
    store = FieldStateStore.from_mapping({'message': 'line one\r\nline two'})
    assert store.snapshot().message == 'line one\nline two'
    assert store.character_count == '17/1000 characters'
