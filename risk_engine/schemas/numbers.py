from typing import Annotated

from pydantic import Field

# JSON numbers only: no numeric strings, no NaN/Infinity literals
FiniteFloat = Annotated[float, Field(strict=True, allow_inf_nan=False)]
