# gaussmarkov

A three-dimensional Gauss-Markov mobility model. Unlike memoryless models, an
object moving under the Gauss-Markov model keeps part of its previous speed,
direction and pitch at every step. A tunable `alpha` controls how much memory
and how much randomness the motion has:

    new = alpha * old + (1 - alpha) * mean + sqrt(1 - alpha**2) * noise

The noise comes from bounded normal distributions. Motion stays within a 3D
`Box`. When the next step would leave the box, the velocity component on the
offending axis is reflected. The mean direction or pitch is mirrored to match.

## Installation

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Usage

```python
import math

from gaussmarkov.geometry import Box, Vector
from gaussmarkov.model import GaussMarkovMobilityModel
from gaussmarkov.randomvars import BoundedNormalVariable, ConstantVariable, UniformVariable

model = GaussMarkovMobilityModel(
    bounds=Box(0, 150000, 0, 150000, 0, 10000),
    time_step=0.5,
    alpha=0.85,
    mean_velocity=UniformVariable(800, 1200),
    mean_direction=UniformVariable(0, 2 * math.pi),
    mean_pitch=ConstantVariable(0.05),
    normal_velocity=BoundedNormalVariable(0.0, 0.0, 0.0),
    normal_direction=BoundedNormalVariable(0.0, 0.2, 0.4),
    normal_pitch=BoundedNormalVariable(0.0, 0.02, 0.04),
    position=Vector(75000, 75000, 5000),
)

model.assign_streams(1)  # reproducible runs
model.on_course_change(lambda m: print(m.now, m.position, m.velocity))
model.advance(10.0)      # simulate ten seconds
```

### Random variables

- `ConstantVariable(value)` always returns `value`.
- `UniformVariable(low, high)` draws uniformly from `[low, high)`.
- `BoundedNormalVariable(mean, variance, bound)` draws from a normal
  distribution. It redraws until the value lies within `bound` of the mean.

Each is called with no arguments to draw a value. `set_stream(n)` seeds it so
that a sequence can be repeated.

### The model

- `position` and `velocity` give the current state as `Vector`s.
- `now` gives the model's clock in seconds.
- `set_position(vector)` moves the object and restarts its walk from there.
- `advance(seconds)` runs the model forward. Direction and speed change
  every `time_step`.
- `assign_streams(n)` seeds the six random variables with streams `n` to
  `n + 5` and returns 6.
- `on_course_change(callback)` registers a function that is called with the
  model each time the course changes.