import pytest
import torch

from torchvariates.probability import GeneratorRandomSource, RandomSource


class TestGeneratorRandomSource:
    """Tests for the torch.Generator-backed source."""

    def test_satisfies_protocol(self):
        assert isinstance(GeneratorRandomSource(), RandomSource)

    def test_uniform_range(self):
        source = GeneratorRandomSource(torch.Generator().manual_seed(0))
        values = [source.uniform() for _ in range(5000)]
        assert all(isinstance(value, float) for value in values)
        assert all(0.0 <= value < 1.0 for value in values)

    def test_uniform_mean(self):
        source = GeneratorRandomSource(torch.Generator().manual_seed(0))
        values = torch.tensor([source.uniform() for _ in range(10_000)])
        assert abs(values.mean().item() - 0.5) < 0.02

    def test_matches_torch_rand(self):
        """Values are the generator's float64 uniforms in order."""
        source = GeneratorRandomSource(
            torch.Generator().manual_seed(42), buffer_size=8
        )
        values = [source.uniform() for _ in range(20)]

        g = torch.Generator().manual_seed(42)
        expected = torch.cat(
            [torch.rand(8, generator=g, dtype=torch.float64) for _ in range(3)]
        ).tolist()[:20]

        assert values == expected

    def test_generator_reproducibility(self):
        """Same generator seed gives same output."""
        a = GeneratorRandomSource(torch.Generator().manual_seed(7))
        b = GeneratorRandomSource(torch.Generator().manual_seed(7))
        assert [a.uniform() for _ in range(100)] == [
            b.uniform() for _ in range(100)
        ]

    def test_bernoulli_frequency(self):
        source = GeneratorRandomSource(torch.Generator().manual_seed(1))
        hits = sum(source.bernoulli(0.3) for _ in range(10_000))
        assert abs(hits / 10_000 - 0.3) < 0.02

    def test_bernoulli_consumes_one_uniform(self):
        a = GeneratorRandomSource(torch.Generator().manual_seed(3))
        b = GeneratorRandomSource(torch.Generator().manual_seed(3))
        for _ in range(50):
            assert a.bernoulli(0.4) == (b.uniform() < 0.4)

    def test_default_generator(self):
        torch.manual_seed(42)
        a = [GeneratorRandomSource().uniform() for _ in range(1)]
        torch.manual_seed(42)
        b = [GeneratorRandomSource().uniform() for _ in range(1)]
        assert a == b

    @pytest.mark.parametrize("buffer_size", [0, -1])
    def test_invalid_buffer_size(self, buffer_size):
        with pytest.raises(ValueError):
            GeneratorRandomSource(buffer_size=buffer_size)
