from typing import List, NewType, Union

Snowflake = NewType("Snowflake", str)
SnowflakeList = List[Snowflake]
SnowflakeLike = Union[Snowflake, str, int]
