from sqlalchemy import BigInteger, Integer

# PK 타입: MySQL은 BIGINT, SQLite는 INTEGER (rowid 자동 증가)
IdType = BigInteger().with_variant(Integer(), "sqlite")
