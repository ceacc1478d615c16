import logging

from pystatsetera.core.config import Config
from pystatsetera.core.domain.edf import EmpiricalDistribution
from pystatsetera.core.domain.moments import RollingMoments
from pystatsetera.core.services.lag import lag
from pystatsetera.core.services.moments import bootstrap, ewma, sample_skew, sample_std_dev
from pystatsetera.core.services.monte_carlo import naive_integrate, random_walk
from pystatsetera.core.services.selection import randomized_select
from pystatsetera.utils.sequences import take


def main():
    cfg = Config("./configs/config.yaml")

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    rng = cfg.random_source()
    path = take(random_walk(rng=rng), 500)

    rolling = RollingMoments(cfg.window)
    for x in path:
        rolling.add(x)
    logging.info("walk end=%d rolling mean=%.3f rolling std=%.3f",
                 path[-1], rolling.mean(), rolling.sample_std_dev())

    steps = [current - lagged for lagged, current in lag(path, cfg.lag)]
    logging.info("lag %d differences: std=%.4f skew=%.4f ewma=%.4f",
                 cfg.lag, sample_std_dev(steps), sample_skew(steps), ewma(steps, 0.7))

    median = randomized_select(list(path), len(path) // 2 + 1, rng=rng)
    logging.info("median of the path: %d", median)

    F = EmpiricalDistribution(path)
    p, lower, upper = F.cdf_with_band(median, cfg.alpha)
    logging.info("F(%d) = %.3f, %.0f%% band [%.3f, %.3f]",
                 median, p, (1 - cfg.alpha) * 100, lower, upper)

    mean, stderr = bootstrap(path, cfg.bootstrap_rounds, None,
                             lambda s: sum(s) / len(s), rng=rng)
    logging.info("bootstrap mean=%.3f stderr=%.3f", mean, stderr)

    quarter = naive_integrate(100_000, 0.0, 1.0, lambda x: (1 - x * x) ** 0.5, rng=rng)
    logging.info("pi estimate: %.5f", quarter * 4)


if __name__ == "__main__":
    main()
