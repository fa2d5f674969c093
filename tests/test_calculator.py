from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from holdify_app.errors import SimulationConfigError
from holdify_app.models.reversal import ConditionalReversal, PercentOfHoldingReversal, ReversalTier, TieredReversal
from holdify_app.models.shareholders import RemunerationMode, Shareholder
from holdify_app.models.taxes import TaxParameters
from holdify_app.sample_data import build_sample_parameters
from holdify_app.services.calculator import SimulationCalculator, run_simulation
from holdify_app.services.generator import MonthlyValueGenerator


def test_sample_parameters_generate_results():
    parameters = build_sample_parameters()
    results = run_simulation(parameters, seed=1)

    assert len(results) == parameters.duration_months
    assert [result.month for result in results] == list(range(1, parameters.duration_months + 1))
    assert all(result.is_amount >= 0 for result in results)


def test_single_month_without_volatility(make_parameters):
    result = run_simulation(make_parameters())[0]

    assert result.profit_holding == 5000
    assert result.is_amount == 750
    assert result.profit_net == 4250
    assert result.dividend_on_profit == 212.5
    assert result.shareholders_dividends == 0
    assert result.holding_to_subsidiary == 0
    assert result.result_subsidiary == 2000
    assert result.subsidiary_capital == 102000
    assert result.holding_capital == 54037.5


def test_losses_are_not_taxed(make_parameters):
    result = run_simulation(make_parameters(base_monthly_charges_holding=12000))[0]

    assert result.result_holding == -2000
    assert result.profit_holding == 0
    assert result.is_amount == 0
    assert result.dividend_on_profit == 0
    assert result.holding_capital == 48000


def test_zero_duration_gives_no_results(make_parameters):
    assert run_simulation(make_parameters(duration_months=0)) == []


def test_negative_duration_is_rejected(make_parameters):
    with pytest.raises(ValidationError):
        make_parameters(duration_months=-1)

    constructed = make_parameters().model_copy(update={"duration_months": -1})
    with pytest.raises(SimulationConfigError):
        run_simulation(constructed)


def test_empty_tax_schedule_fails_before_simulating(make_parameters):
    generator = MonthlyValueGenerator(seed=3)
    parameters = make_parameters(taxes=TaxParameters(brackets=[]), duration_months=5)
    with pytest.raises(SimulationConfigError):
        SimulationCalculator(generator).run(parameters)


def test_non_finite_rate_fails_fast(make_parameters):
    parameters = make_parameters().model_copy(update={"monthly_growth_rate": float("nan")})
    with pytest.raises(SimulationConfigError):
        run_simulation(parameters)


def test_shareholder_investment_is_injected_once(make_parameters):
    parameters = make_parameters(
        initial_holding_capital=100000,
        base_monthly_revenue_holding=0,
        base_monthly_charges_holding=0,
        dividend_on_profit_ratio=0,
        duration_months=2,
        shareholders=[
            Shareholder(
                name="A",
                investment=50000,
                dividend_rate=0.12,
                remuneration_mode=RemunerationMode.ON_INVESTMENT,
            )
        ],
    )
    results = run_simulation(parameters)

    assert [result.shareholders_dividends for result in results] == [500, 500]
    assert [result.holding_capital for result in results] == [149500, 149000]


def test_capital_based_revenue_follows_holding_capital(make_parameters):
    parameters = make_parameters(
        initial_holding_capital=100000,
        use_capital_based_revenue=True,
        capital_revenue_rate=0.01,
        duration_months=2,
        shareholders=[
            Shareholder(
                name="A",
                investment=50000,
                dividend_rate=0.12,
                remuneration_mode=RemunerationMode.ON_INVESTMENT,
            )
        ],
    )
    first, second = run_simulation(parameters)

    assert first.revenue_holding == 1500
    assert first.result_holding == -3500
    assert first.holding_capital == 146000
    assert second.revenue_holding == 1460


def test_shareholders_are_paid_after_dividend_on_profit(make_parameters):
    parameters = make_parameters(
        initial_holding_capital=0,
        shareholders=[Shareholder(name="A", investment=50000, dividend_rate=0.05)],
    )
    result = run_simulation(parameters)[0]

    assert result.shareholders_dividends == pytest.approx(4037.5 * 0.05, abs=0.01)
    assert len(result.shareholder_payouts) == 1
    assert result.shareholder_payouts[0].gross == result.shareholders_dividends


def test_percent_of_holding_transfer_uses_opening_capital(make_parameters):
    parameters = make_parameters(
        initial_holding_capital=100000,
        reversal_policy=PercentOfHoldingReversal(percentage=0.1),
    )
    result = run_simulation(parameters)[0]

    assert result.holding_to_subsidiary == pytest.approx(10000)
    assert result.subsidiary_capital == 112000


def test_conditional_transfer(make_parameters):
    parameters = make_parameters(
        initial_holding_capital=150000,
        reversal_policy=ConditionalReversal(threshold=100000, amount=5000),
    )
    assert run_simulation(parameters)[0].holding_to_subsidiary == 5000


def test_tiered_transfer_uses_net_profit(make_parameters):
    parameters = make_parameters(
        reversal_policy=TieredReversal(
            tiers=[
                ReversalTier(profit_threshold=4000, amount=1000),
                ReversalTier(profit_threshold=5000, amount=3000),
            ]
        ),
    )
    # net profit is 4250
    assert run_simulation(parameters)[0].holding_to_subsidiary == 1000


def test_capital_conservation_with_volatility(make_parameters):
    parameters = make_parameters(
        volatility=0.3,
        monthly_growth_rate=0.01,
        duration_months=24,
        shareholders=[
            Shareholder(name="A", investment=30000, dividend_rate=0.1),
            Shareholder(
                name="B",
                investment=20000,
                dividend_rate=0.06,
                remuneration_mode=RemunerationMode.ON_INVESTMENT,
            ),
        ],
        reversal_policy=PercentOfHoldingReversal(percentage=0.02),
    )
    results = run_simulation(parameters, seed=11)

    holding = parameters.initial_holding_capital + parameters.total_shareholder_investment()
    subsidiary = parameters.initial_subsidiary_capital
    for result in results:
        expected_holding = (
            holding
            + result.result_holding
            - result.is_amount
            - result.dividend_on_profit
            - result.shareholders_dividends
            - result.holding_to_subsidiary
        )
        expected_subsidiary = subsidiary + result.result_subsidiary + result.holding_to_subsidiary
        assert result.holding_capital == pytest.approx(expected_holding, abs=0.01)
        assert result.subsidiary_capital == pytest.approx(expected_subsidiary, abs=0.01)
        assert result.profit_holding == max(0.0, result.result_holding)
        holding = result.holding_capital
        subsidiary = result.subsidiary_capital


def test_four_draws_per_month(make_parameters, sequence_uniform):
    uniform = sequence_uniform([0.4, 0.7])
    calculator = SimulationCalculator(MonthlyValueGenerator(uniform=uniform))
    calculator.run(make_parameters(duration_months=3))
    assert uniform.calls == 3 * 4 * 2


def test_period_start_follows_calendar(make_parameters):
    results = run_simulation(make_parameters(duration_months=3, start_date=date(2024, 1, 31)))
    assert [result.period_start for result in results] == [
        date(2024, 1, 31),
        date(2024, 2, 29),
        date(2024, 3, 31),
    ]


def test_results_are_frozen(make_parameters):
    result = run_simulation(make_parameters())[0]
    with pytest.raises(ValidationError):
        result.holding_capital = 0
