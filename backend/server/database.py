"""SQLite database — connection + schema + migrations."""

import logging
import os
import sqlite3
from server.config import DB_PATH

logger = logging.getLogger(__name__)


def get_db():
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_db():
    db_dir = os.path.dirname(DB_PATH)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    conn = get_db()

    conn.executescript("""
        CREATE TABLE IF NOT EXISTS study_plans (
            id TEXT PRIMARY KEY,
            exam_type TEXT NOT NULL,
            exam_date TEXT NOT NULL,
            focus_subject_keys TEXT DEFAULT '[]',
            tips TEXT DEFAULT '[]',
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS plan_tasks (
            row_id INTEGER PRIMARY KEY AUTOINCREMENT,
            plan_id TEXT NOT NULL,
            task_id TEXT NOT NULL,
            day_date TEXT NOT NULL,
            start_time TEXT NOT NULL,
            end_time TEXT NOT NULL,
            activity TEXT NOT NULL,
            category TEXT NOT NULL CHECK(category IN ('study', 'meal', 'break', 'sleep', 'revision', 'other')),
            subject_label TEXT,
            is_completed INTEGER DEFAULT 0,
            is_custom INTEGER DEFAULT 0,
            sort_order INTEGER DEFAULT 0,
            UNIQUE (plan_id, task_id),
            FOREIGN KEY (plan_id) REFERENCES study_plans(id) ON DELETE CASCADE
        );

        CREATE INDEX IF NOT EXISTS idx_plans_created ON study_plans(created_at);
        CREATE INDEX IF NOT EXISTS idx_plan_tasks_order ON plan_tasks(plan_id, sort_order);
    """)

    conn.commit()
    conn.close()
    logger.info(f"Database ready at {DB_PATH}")
