DATABASE_FILE_NAME = 'database.sqlite'
WORDS_TABLE_NAME = 'words'
DEFAULT_POOL_SIZE = 5
