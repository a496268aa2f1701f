"""Hypothesis strategies for property-based testing of myoption types."""

from hypothesis import strategies as st

from myoption import Nothing, Some

integers = st.integers()

# Option strategies
somes = integers.map(Some)
options = st.one_of(st.just(Nothing), somes)

# Functions int -> Option[int], for bind laws
option_fns = st.sampled_from([
    lambda x: Some(x + 1),
    lambda x: Some(x * 2),
    lambda x: Some(x) if x % 2 == 0 else Nothing,
    lambda x: Nothing,
])
