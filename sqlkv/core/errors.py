"""
Error types for sqlkv.
"""

class KVError(Exception):
    """sqlkv 기본 예외"""

class UnsupportedValueTypeError(KVError, TypeError):
    """저장할 수 없는 값 타입"""
    
    def __init__(self, value_type: type = None):
        self.value_type = value_type
        super().__init__("Unsupported value type")
