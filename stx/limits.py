"""Numeric limits of the fixed-width integer and floating-point types."""

import sys

U8_MIN = 0
U8_MAX = 2**8 - 1
U16_MIN = 0
U16_MAX = 2**16 - 1
U32_MIN = 0
U32_MAX = 2**32 - 1
U64_MIN = 0
U64_MAX = 2**64 - 1
USIZE_MIN = 0
USIZE_MAX = 2**64 - 1

I8_MIN = -(2**7)
I8_MAX = 2**7 - 1
I16_MIN = -(2**15)
I16_MAX = 2**15 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

U_MIN = U32_MIN
U_MAX = U32_MAX

I_MIN = I32_MIN
I_MAX = I32_MAX

F32_MIN_POSITIVE = 1.1754943508222875e-38
F32_MAX = 3.4028234663852886e38
F32_MIN = -F32_MAX

F64_MIN_POSITIVE = sys.float_info.min
F64_MAX = sys.float_info.max
F64_MIN = -F64_MAX

F32_EPSILON = 1.1920928955078125e-07
F64_EPSILON = sys.float_info.epsilon