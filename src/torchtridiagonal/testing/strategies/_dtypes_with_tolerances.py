import hypothesis.strategies
import torch

# (dtype, absolute tolerance per unit of matrix magnitude)
dtypes_with_tolerances = hypothesis.strategies.sampled_from(
    [
        (torch.float32, 1e-3),
        (torch.float64, 1e-9),
    ]
)
