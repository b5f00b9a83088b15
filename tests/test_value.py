import pytest

from bencodec import ByteString, Dictionary, Integer, List, UnsupportedType, Value, to_value


class TestInteger:
    def test_range(self):
        assert Integer(2 ** 63 - 1) == 2 ** 63 - 1
        assert Integer(-2 ** 63) == -2 ** 63
        with pytest.raises(OverflowError):
            Integer(2 ** 63)
        with pytest.raises(OverflowError):
            Integer(-2 ** 63 - 1)

    def test_inspection(self):
        value = Integer(7)
        assert isinstance(value, Value)
        assert value.tag == 'integer'
        assert value.payload == 7
        assert type(value.payload) is int
        assert repr(value) == 'Integer(7)'

    @pytest.mark.parametrize('obj', ['12', 1.9, True, None])
    def test_rejects_non_int(self, obj):
        with pytest.raises(UnsupportedType):
            Integer(obj)


class TestByteString:
    def test_inspection(self):
        value = ByteString(b'spam')
        assert value.tag == 'bytestring'
        assert type(value.payload) is bytes
        assert len(value) == 4
        assert repr(value) == "ByteString(b'spam')"

    def test_variants_never_equal(self):
        assert ByteString(b'1') != Integer(1)
        assert List() != Dictionary()


class TestList:
    def test_converts_items(self):
        value = List([1, b'a', 'b', [2]])
        assert [item.tag for item in value] == ['integer', 'bytestring', 'bytestring', 'list']
        value.append(3)
        value.insert(0, {'k': 1})
        value.extend([b'x'])
        value[1] = 'c'
        assert all(isinstance(item, Value) for item in value)
        assert value.payload == [{'k': 1}, b'c', b'a', b'b', [2], 3, b'x']

    def test_slice_assignment(self):
        value = List([1, 2, 3])
        value[1:] = [b'x']
        assert value == List([1, b'x'])
        assert isinstance(value[1], ByteString)

    def test_structural_equality(self):
        assert List([b'spam', b'eggs']) == List([ByteString(b'spam'), ByteString(b'eggs')])
        assert List([b'spam', b'eggs']) != List([b'eggs', b'spam'])

    def test_in_place_add(self):
        value = List([1])
        value += [2, b'x']
        assert isinstance(value, List)
        assert [type(item) for item in value.data] == [Integer, Integer, ByteString]

    def test_concatenation(self):
        for value in (List([1]) + [b'x'], [b'x'] + List([1])):
            assert isinstance(value, List)
            assert all(isinstance(item, Value) for item in value.data)


class TestDictionary:
    def test_iteration_sorted(self):
        value = Dictionary()
        value['spam'] = 1
        value['cow'] = 2
        assert list(value) == ['cow', 'spam']
        assert list(value.items()) == [('cow', Integer(2)), ('spam', Integer(1))]

    def test_equality_ignores_insertion_order(self):
        assert Dictionary({'a': 1, 'b': 2}) == Dictionary({'b': 2, 'a': 1})
        assert Dictionary({'a': 1}) != Dictionary({'a': 2})

    def test_bytes_keys(self):
        value = Dictionary({b'info': {b'name': b'x'}})
        assert list(value) == ['info']
        assert value[b'info']['name'] == b'x'
        assert b'info' in value
        assert b'\xff' not in value
        assert 1 not in value
        assert value.get(b'missing') is None
        del value[b'info']
        assert len(value) == 0

    def test_invalid_keys(self):
        with pytest.raises(TypeError):
            Dictionary({1: b'x'})
        with pytest.raises(UnicodeDecodeError):
            Dictionary({b'\xff': b'x'})
        with pytest.raises(UnicodeEncodeError):
            Dictionary({'\ud800': b'x'})

    def test_in_place_or(self):
        value = Dictionary({'a': 1})
        value |= {b'b': 2, 'c': [3]}
        assert list(value.data) == ['a', 'b', 'c']
        assert all(isinstance(item, Value) for item in value.data.values())

    def test_setdefault(self):
        value = Dictionary()
        item = value.setdefault(b'k', [1])
        assert item is value['k']
        assert isinstance(item, List)
        assert value.setdefault('k', 2) is item
        assert list(value.data) == ['k']

    def test_payload(self):
        value = Dictionary({'b': [1], 'a': {'c': b'd'}})
        assert value.payload == {'a': {'c': b'd'}, 'b': [1]}
        assert type(value.payload['b']) is list

    def test_repr(self):
        assert repr(Dictionary({'b': 1, 'a': b'x'})) == "Dictionary({'a': ByteString(b'x'), 'b': Integer(1)})"


class TestToValue:
    def test_value_unchanged(self):
        value = Integer(1)
        assert to_value(value) is value

    def test_str_is_utf8(self):
        assert to_value('种子') == ByteString('种子'.encode())

    def test_tuple_and_bytearray(self):
        assert to_value((1, bytearray(b'x'))) == List([Integer(1), ByteString(b'x')])

    @pytest.mark.parametrize('obj', [True, None, 1.0, {1, 2}, object()])
    def test_unsupported(self, obj):
        with pytest.raises(UnsupportedType):
            to_value(obj)

    def test_out_of_range(self):
        with pytest.raises(OverflowError):
            to_value(2 ** 64)
