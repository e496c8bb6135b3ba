"""
app/domain/records.py

Typed candidate records decoded from CSV rows, one closed type per entity kind.

Every field carries a ``ColumnSpec`` in its dataclass metadata. That spec is
the single description of the column: canonical field name, localized header
label, coercion kind, required flag, allowed values and the template sample.
The header localizer, the row decoder and the template exporter all read it
from here.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from app.domain.values import UNSET, Maybe

TEXT = "text"
INT = "int"
BOOL = "bool"
LIST = "list"
ENUM = "enum"

_COLUMN_KEY = "column"

COMPANY_SIZES: tuple[str, ...] = ("startup", "small", "medium", "large", "enterprise")
COMPANY_STATUSES: tuple[str, ...] = (
    "active",
    "inactive",
    "prospect",
    "prospect_contacted",
    "appointment",
    "no_approach",
    "suspended",
    "paused",
)
STORE_STATUSES: tuple[str, ...] = ("active", "inactive")
JOB_STATUSES: tuple[str, ...] = ("draft", "published", "active", "paused", "inactive", "closed")
SALARY_TYPES: tuple[str, ...] = ("hourly", "daily", "monthly", "annual")
EMPLOYMENT_TYPES: tuple[str, ...] = (
    "full-time",
    "part-time",
    "contract",
    "temporary",
    "intern",
    "freelance",
)
EXPERIENCE_LEVELS: tuple[str, ...] = ("none", "some", "experienced")
EDUCATION_LEVELS: tuple[str, ...] = ("none", "high-school", "vocational", "university")


@dataclass(frozen=True)
class ColumnSpec:
    """
    Description of one importable column.
    """

    field: str
    label: str
    kind: str = TEXT
    required: bool = False
    choices: tuple[str, ...] = ()
    sample: str = ""
    attr: str = ""


def column(
    field_name: str,
    label: str,
    *,
    kind: str = TEXT,
    required: bool = False,
    choices: tuple[str, ...] = (),
    sample: str = "",
) -> Any:
    """
    Declare a record field bound to a CSV column. Unsupplied values default to UNSET.
    """

    spec = ColumnSpec(
        field=field_name,
        label=label,
        kind=ENUM if choices else kind,
        required=required,
        choices=choices,
        sample=sample,
    )
    return dataclasses.field(default=UNSET, metadata={_COLUMN_KEY: spec})


@lru_cache(maxsize=None)
def record_columns(record_type: type) -> tuple[ColumnSpec, ...]:
    """
    Return the column specs of a record type in declaration order.
    """

    return tuple(
        dataclasses.replace(item.metadata[_COLUMN_KEY], attr=item.name)
        for item in dataclasses.fields(record_type)
        if _COLUMN_KEY in item.metadata
    )


def record_values(record: Any) -> dict[str, Any]:
    """
    Return ``{canonical field: value}`` for a record, UNSET values included.
    """

    return {spec.field: getattr(record, spec.attr) for spec in record_columns(type(record))}


def build_record(record_type: type, values: dict[str, Any]) -> Any:
    """
    Build a record from ``{canonical field: value}``; unknown fields are ignored.
    """

    kwargs = {
        spec.attr: values[spec.field]
        for spec in record_columns(record_type)
        if spec.field in values
    }
    return record_type(**kwargs)


@dataclass(frozen=True)
class CompanyRecord:
    entity_id: Maybe[str] = column("id", "ID")
    name: Maybe[str] = column("name", "企業名", required=True, sample="株式会社サンプル")
    address: Maybe[str] = column("address", "住所", required=True, sample="東京都新宿区新宿1-1-1")
    email: Maybe[str] = column("email", "メールアドレス", required=True, sample="info@example.com")
    size: Maybe[str] = column("size", "企業規模", required=True, choices=COMPANY_SIZES, sample="small")
    is_public: Maybe[bool] = column("isPublic", "公開状況", kind=BOOL, required=True, sample="true")
    status: Maybe[str] = column(
        "status", "ステータス", required=True, choices=COMPANY_STATUSES, sample="active"
    )
    employee_count: Maybe[int] = column("employeeCount", "従業員数", kind=INT, sample="50")
    capital: Maybe[int] = column("capital", "資本金", kind=INT, sample="1000")
    established_year: Maybe[int] = column("establishedYear", "設立年", kind=INT, sample="2000")
    representative: Maybe[str] = column("representative", "代表者名", sample="田中太郎")
    website: Maybe[str] = column("website", "ウェブサイト", sample="https://www.example.com")
    phone: Maybe[str] = column("phone", "電話番号", sample="03-1234-5678")
    industry: Maybe[str] = column("industry", "業界", sample="飲食")
    business_type: Maybe[list[str]] = column(
        "businessType", "事業種別", kind=LIST, sample="寿司;和食"
    )
    feature1: Maybe[str] = column("feature1", "会社特徴1", sample="最新技術の導入")
    feature2: Maybe[str] = column("feature2", "会社特徴2", sample="働きやすい環境")
    feature3: Maybe[str] = column("feature3", "会社特徴3", sample="成長できる職場")
    career_path: Maybe[str] = column("careerPath", "キャリアパス", sample="海外就職可能")
    young_recruit_reason: Maybe[str] = column("youngRecruitReason", "若手入社理由", sample="技術力向上")
    has_shokunin_univ_record: Maybe[bool] = column(
        "hasShokuninUnivRecord", "飲食人大学実績", kind=BOOL, sample="true"
    )
    has_housing_support: Maybe[bool] = column("hasHousingSupport", "住宅支援", kind=BOOL, sample="true")
    full_time_age_group: Maybe[str] = column("fullTimeAgeGroup", "正社員年齢層", sample="20代-30代")
    independence_record: Maybe[str] = column("independenceRecord", "独立実績", sample="3名独立")
    has_independence_support: Maybe[bool] = column(
        "hasIndependenceSupport", "独立支援", kind=BOOL, sample="true"
    )
    contract_start_date: Maybe[str] = column("contractStartDate", "取引開始日", sample="2023-01-01")
    consultant_id: Maybe[str] = column("consultantId", "担当コンサルタントID", sample="consultant-123")
    memo: Maybe[str] = column("memo", "メモ", sample="優良企業です")
    domino_id: Maybe[str] = column("dominoId", "DominoID", sample="domino-123")
    imported_at: Maybe[str] = column("importedAt", "インポート日時", sample="2023-12-01")


@dataclass(frozen=True)
class StoreRecord:
    entity_id: Maybe[str] = column("id", "ID")
    name: Maybe[str] = column("name", "店舗名", required=True, sample="鮨 さんぷる 新宿店")
    company_id: Maybe[str] = column("companyId", "企業ID", sample="company-123")
    address: Maybe[str] = column("address", "店舗住所", sample="東京都新宿区西新宿1-1-1")
    nearest_station: Maybe[str] = column("nearestStation", "最寄り駅", sample="新宿駅")
    website: Maybe[str] = column("website", "店舗URL", sample="https://store.example.com")
    unit_price: Maybe[int] = column("unitPrice", "単価", kind=INT, sample="15000")
    seat_count: Maybe[int] = column("seatCount", "席数", kind=INT, sample="12")
    is_reservation_required: Maybe[bool] = column(
        "isReservationRequired", "予約制", kind=BOOL, sample="true"
    )
    instagram_url: Maybe[str] = column(
        "instagramUrl", "Instagram URL", sample="https://instagram.com/example"
    )
    tabelog_url: Maybe[str] = column("tabelogUrl", "食べログURL", sample="https://tabelog.com/example")
    google_review_score: Maybe[str] = column("googleReviewScore", "Google口コミスコア", sample="4.5")
    tabelog_score: Maybe[str] = column("tabelogScore", "食べログスコア", sample="3.8")
    reputation: Maybe[str] = column("reputation", "実績", sample="ミシュラン一つ星")
    staff_review: Maybe[str] = column("staffReview", "スタッフ感想", sample="握りが丁寧")
    training_period: Maybe[str] = column("trainingPeriod", "握れるまでの期間", sample="2年")
    owner_photo: Maybe[str] = column("ownerPhoto", "大将の写真", sample="https://example.com/owner.jpg")
    owner_video: Maybe[str] = column("ownerVideo", "大将の動画", sample="https://example.com/owner.mp4")
    interior_photo: Maybe[str] = column(
        "interiorPhoto", "店内の写真", sample="https://example.com/interior.jpg"
    )
    status: Maybe[str] = column("status", "ステータス", choices=STORE_STATUSES, sample="active")


@dataclass(frozen=True)
class JobRecord:
    entity_id: Maybe[str] = column("id", "ID")
    title: Maybe[str] = column("title", "求人タイトル", required=True, sample="ホールスタッフ")
    company_id: Maybe[str] = column("companyId", "企業ID", required=True, sample="company-123")
    store_id: Maybe[str] = column("storeId", "店舗ID", sample="store-123")
    description: Maybe[str] = column("description", "求人内容", sample="お客様への接客、料理の提供など")
    requirements: Maybe[str] = column("requirements", "応募要件", sample="未経験歓迎")
    benefits: Maybe[str] = column("benefits", "待遇・福利厚生", sample="交通費支給、まかない付き")
    location: Maybe[str] = column("location", "勤務地", sample="東京都新宿区")
    work_hours: Maybe[str] = column("workHours", "勤務時間", sample="10:00-22:00（シフト制）")
    vacation: Maybe[str] = column("vacation", "休日", sample="週2日以上")
    transportation: Maybe[str] = column("transportation", "交通手段", sample="新宿駅徒歩5分")
    dormitory_info: Maybe[str] = column("dormitoryInfo", "寮情報", sample="寮あり")
    salary_type: Maybe[str] = column("salaryType", "給与形態", choices=SALARY_TYPES, sample="hourly")
    salary_min: Maybe[int] = column("salaryMin", "最低給与", kind=INT, sample="1000")
    salary_max: Maybe[int] = column("salaryMax", "最高給与", kind=INT, sample="1200")
    employment_type: Maybe[str] = column(
        "employmentType", "雇用形態", choices=EMPLOYMENT_TYPES, sample="part-time"
    )
    experience: Maybe[str] = column("experience", "経験要件", choices=EXPERIENCE_LEVELS, sample="none")
    education: Maybe[str] = column("education", "学歴要件", choices=EDUCATION_LEVELS, sample="none")
    status: Maybe[str] = column("status", "ステータス", required=True, choices=JOB_STATUSES, sample="active")
    is_public: Maybe[bool] = column("isPublic", "公開状況", kind=BOOL, sample="true")
    tags: Maybe[list[str]] = column("tags", "タグ", kind=LIST, sample="飲食;接客;未経験歓迎")
    memo: Maybe[str] = column("memo", "メモ", sample="アルバイト募集中")
