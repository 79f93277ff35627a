"""
hypothesis를 활용한 코덱 및 값 변환 테스트

이 모듈은 hypothesis 패키지를 사용하여
base64 코덱과 값 태깅의 속성 기반 테스트를 수행합니다.
"""

import binascii
import json
import pytest
from hypothesis import given, strategies as st

from sqlkv.core.codec import encode_binary, decode_binary
from sqlkv.core.values import TextValue, JsonValue, tag_value, encode_value


json_values = st.recursive(
    st.none() | st.integers() | st.text(),
    lambda children: st.lists(children, max_size=5) | st.dictionaries(st.text(max_size=10), children, max_size=5),
    max_leaves=20
)


class TestBinaryCodec:
    """base64 코덱 테스트"""
    
    @given(data=st.binary())
    def test_round_trip(self, data: bytes):
        """인코딩 후 디코딩하면 원본과 같아야 함"""
        assert decode_binary(encode_binary(data)) == data
    
    @given(data=st.binary())
    def test_encoding_is_ascii_text(self, data: bytes):
        """인코딩 결과는 ASCII 문자열"""
        text = encode_binary(data)
        assert isinstance(text, str)
        assert text.isascii()
    
    def test_bytearray_and_memoryview(self):
        """bytes-like 입력 지원"""
        assert encode_binary(bytearray(b"abc")) == "YWJj"
        assert encode_binary(memoryview(b"abc")) == "YWJj"
    
    def test_empty_buffer(self):
        """빈 버퍼"""
        assert encode_binary(b"") == ""
        assert decode_binary("") == b""
    
    def test_malformed_input(self):
        """잘못된 base64 입력은 디코딩 오류"""
        with pytest.raises(binascii.Error):
            decode_binary("not base64!")


class TestValueTaggingProperties:
    """값 태깅 속성 테스트"""
    
    @given(text=st.text())
    def test_text_stored_verbatim(self, text: str):
        """문자열은 그대로 저장"""
        tagged = tag_value(text)
        assert tagged == TextValue(text)
        assert encode_value(tagged) == text
    
    @given(value=json_values.filter(lambda v: not isinstance(v, str)))
    def test_structures_serialize_as_json(self, value):
        """구조화 값은 JSON으로 복원 가능"""
        tagged = tag_value(value)
        assert isinstance(tagged, JsonValue)
        assert json.loads(encode_value(tagged)) == value
