import importlib


def test_circular_dependencies():
    """Test if modules can be imported without circular dependencies"""
    # List of all modules to test in dependency order
    modules = [
        # Independent modules (no internal deps)
        'binlog_values.exceptions',
        'binlog_values.values',

        # Models and options
        'binlog_values.options',
        'binlog_values.schema',
        'binlog_values.column',

        # Adapters
        'binlog_values.adapters.type_mapping',
        'binlog_values.adapters.type_conversion',
        'binlog_values.adapters',

        # MySQL specialization and row glue
        'binlog_values.mysql',
        'binlog_values.row',

        # Main package
        'binlog_values',
    ]

    # Test each module in sequence
    results = {}
    for module in modules:
        print(f'Checking {module}... ', end='')
        try:
            importlib.import_module(module)
            print('✓ Success')
            results[module] = True
        except Exception as e:
            print(f'✗ Failed: {e}')
            results[module] = False

    # List failures
    failures = [m for m, v in results.items() if not v]

    # Assert for pytest
    assert not failures, f'{len(failures)} modules failed circular dependency check: {failures}'


if __name__ == '__main__':
    __import__('pytest').main([__file__])
