from binlog_values.column import Column


def test_column_get_names():
    """Test getting column names from a list of Columns"""
    columns = [
        Column(name='id', type_name='INT'),
        Column(name='size', type_name="ENUM('s','m','l')"),
        Column(name='built', type_name='YEAR'),
    ]

    names = Column.get_names(columns)
    assert names == ['id', 'size', 'built']


def test_column_get_column_by_name():
    """Test finding a column by name"""
    columns = [
        Column(name='id', type_name='INT'),
        Column(name='size', type_name="ENUM('s','m','l')"),
    ]

    col = Column.get_column_by_name(columns, 'size')
    assert col is not None
    assert col.type_name == "ENUM('s','m','l')"

    # Column not found
    col = Column.get_column_by_name(columns, 'nonexistent')
    assert col is None


def test_column_base_type():
    """Test extracting the type keyword"""
    assert Column('a', 'varchar(255)').base_type() == 'VARCHAR'
    assert Column('a', "set('x','y')").base_type() == 'SET'
    assert Column('a', 'YEAR').base_type() == 'YEAR'
    assert Column('a', 'int(10) unsigned').base_type() == 'INT'
    assert Column('a', 'double precision').base_type() == 'DOUBLE'
    assert Column('a', None).base_type() == ''


def test_column_to_dict():
    """Test dictionary conversion"""
    col = Column(name='price', type_name='DECIMAL(10,2)', length=10, scale=2, optional=False, position=4)
    assert col.to_dict() == {
        'name': 'price',
        'type_name': 'DECIMAL(10,2)',
        'length': 10,
        'scale': 2,
        'optional': False,
        'position': 4,
    }


def test_column_repr():
    """Test string representation"""
    col = Column(name='built', type_name='YEAR(4)')
    assert repr(col) == "Column(name='built', type_name='YEAR(4)', optional=True)"


def test_column_defaults():
    col = Column('c')
    assert col.type_name is None
    assert col.optional is True
    assert col.position is None
