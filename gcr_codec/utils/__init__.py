from .flight_table import FLIGHT_TABLE_COLUMNS, flight_rows, flights_dataframe

__all__ = ['FLIGHT_TABLE_COLUMNS', 'flight_rows', 'flights_dataframe']
