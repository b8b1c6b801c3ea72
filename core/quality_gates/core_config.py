"""
Built-in Quality Gate Configuration - Hardcoded Setup
=====================================================

Defines the quality gate registered on first start:
- 1 Built-in gate: "SonarQube way"
- 4 Conditions, all evaluated over the leak period (new code)

This data is used by the registration routine to populate the database.
No fixtures needed - this is the source of truth.
"""

# ============================================================================
# PERIODS
# ============================================================================

LEAK_PERIOD = 1


# ============================================================================
# METRICS
# ============================================================================

class CoreMetrics:
    """Metric keys used by the built-in gate."""
    NEW_VULNERABILITIES = 'new_vulnerabilities'
    NEW_BUGS = 'new_bugs'
    NEW_SQALE_DEBT_RATIO = 'new_sqale_debt_ratio'
    NEW_COVERAGE = 'new_coverage'


# ============================================================================
# BUILT-IN QUALITY GATE
# ============================================================================

BUILTIN_QUALITY_GATE = 'SonarQube way'

BUILTIN_QUALITY_GATE_CONDITIONS = (
    {
        'metric_key': CoreMetrics.NEW_VULNERABILITIES,
        'operator': 'GT',
        'warning_threshold': None,
        'error_threshold': '0',
        'period': LEAK_PERIOD,
    },
    {
        'metric_key': CoreMetrics.NEW_BUGS,
        'operator': 'GT',
        'warning_threshold': None,
        'error_threshold': '0',
        'period': LEAK_PERIOD,
    },
    {
        'metric_key': CoreMetrics.NEW_SQALE_DEBT_RATIO,
        'operator': 'GT',
        'warning_threshold': None,
        'error_threshold': '5',
        'period': LEAK_PERIOD,
    },
    {
        'metric_key': CoreMetrics.NEW_COVERAGE,
        'operator': 'LT',
        'warning_threshold': None,
        'error_threshold': '80',
        'period': LEAK_PERIOD,
    },
)
