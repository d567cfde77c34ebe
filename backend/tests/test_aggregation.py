"""
Aggregation tests
Video details, professional averages, dangling references and dashboards
"""
from models.user import UserType

from conftest import create_video_in_store, rate


class TestVideoAggregation:
    """Test VideoWithDetails views"""

    def test_unrated_video_details(self, catalog, test_video, professional, technology):
        """Category, projected professional and zero stats for a new video"""
        details = catalog.video_with_details(test_video.id)

        assert details is not None
        assert details.average_rating == 0
        assert details.rating_count == 0

        data = details.to_dict()
        assert data["id"] == test_video.id
        assert data["price"] == 29.99
        assert data["category"]["name"] == "technology"
        assert data["category"]["id"] == technology.id
        assert data["professional"] == {
            "id": professional.id,
            "name": "Paula Professional",
            "experience": 10,
            "profileImage": "https://example.com/paula.jpg",
        }
        assert data["averageRating"] == 0
        assert data["ratingCount"] == 0

    def test_average_is_exact_mean(self, store, catalog, test_video, student, other_student, password_hash):
        third = store.create_user(
            email="third@example.com",
            username="third",
            password=password_hash,
            name="Third",
            user_type=UserType.STUDENT,
        )
        rate(store, student, test_video, 5)
        rate(store, other_student, test_video, 4)
        rate(store, third, test_video, 4)

        details = catalog.video_with_details(test_video.id)
        assert details.average_rating == (5 + 4 + 4) / 3
        assert details.rating_count == 3

    def test_purchase_then_rate_scenario(self, store, catalog, test_video, student):
        rate(store, student, test_video, 5, "great")

        assert store.get_user_rating_by_video_id(student.id, test_video.id).rating == 5
        assert catalog.video_with_details(test_video.id).average_rating == 5

    def test_reads_recompute_after_writes(self, store, catalog, test_video, student):
        assert catalog.video_with_details(test_video.id).rating_count == 0
        rate(store, student, test_video, 2)
        assert catalog.video_with_details(test_video.id).rating_count == 1
        rate(store, student, test_video, 4)
        assert catalog.video_with_details(test_video.id).average_rating == 4

    def test_missing_video_is_absent(self, catalog):
        assert catalog.video_with_details(12345) is None

    def test_dangling_category_is_absent_and_skipped(self, store, catalog, professional, test_video):
        orphan = store.create_video(
            title="Orphan",
            description="Bad category",
            video_url="https://player.example.com/orphan",
            price=5,
            duration=30,
            user_id=professional.id,
            category_id=999,
        )

        assert catalog.video_with_details(orphan.id) is None
        assert [video.id for video in catalog.videos_with_details()] == [test_video.id]

    def test_dangling_owner_is_absent_and_skipped(self, store, catalog, technology, test_video):
        orphan = store.create_video(
            title="Ownerless",
            description="Bad owner",
            video_url="https://player.example.com/ownerless",
            price=5,
            duration=30,
            user_id=999,
            category_id=technology.id,
        )

        assert catalog.video_with_details(orphan.id) is None
        assert [video.id for video in catalog.videos_with_details()] == [test_video.id]

    def test_listing_filters_by_category_in_insertion_order(self, store, catalog, professional, technology):
        health = store.get_category_by_name("health")
        first = create_video_in_store(store, professional, technology, "First")
        create_video_in_store(store, professional, health, "Health")
        third = create_video_in_store(store, professional, technology, "Third")

        assert [v.id for v in catalog.videos_with_details(technology.id)] == [first.id, third.id]
        assert len(catalog.videos_with_details()) == 3
        assert catalog.videos_with_details(store.get_category_by_name("law").id) == []


class TestProfessionalAggregation:
    """Test ProfessionalWithVideos views"""

    def test_unrated_videos_excluded_from_average(self, store, catalog, professional, technology, student, other_student):
        rated = create_video_in_store(store, professional, technology, "Rated")
        unrated = create_video_in_store(store, professional, technology, "Unrated")
        rate(store, student, rated, 5)
        rate(store, other_student, rated, 3)

        result = catalog.professional_with_videos(professional.id)

        assert [video.id for video in result.videos] == [rated.id, unrated.id]
        assert result.videos[0].average_rating == 4.0
        assert result.videos[0].rating_count == 2
        assert result.average_rating == 4.0

    def test_average_of_video_averages(self, store, catalog, professional, technology, student, other_student):
        v1 = create_video_in_store(store, professional, technology, "One")
        v2 = create_video_in_store(store, professional, technology, "Two")
        rate(store, student, v1, 5)
        rate(store, other_student, v1, 4)  # 4.5
        rate(store, student, v2, 2)        # 2.0

        assert catalog.professional_with_videos(professional.id).average_rating == (4.5 + 2.0) / 2

    def test_professional_without_videos(self, catalog, professional):
        result = catalog.professional_with_videos(professional.id)

        assert result.videos == []
        assert result.average_rating == 0
        data = result.to_dict()
        assert data["username"] == "prouser"
        assert "password" not in data

    def test_student_or_missing_is_absent(self, catalog, student):
        assert catalog.professional_with_videos(student.id) is None
        assert catalog.professional_with_videos(999) is None

    def test_all_professionals_in_insertion_order(self, store, catalog, professional, student, technology, password_hash):
        second = store.create_user(
            email="second@example.com",
            username="secondpro",
            password=password_hash,
            name="Second Pro",
            user_type=UserType.PROFESSIONAL,
        )
        video = create_video_in_store(store, second, technology, "Second's video")

        result = catalog.professionals_with_videos()

        assert [p.id for p in result] == [professional.id, second.id]
        assert result[0].videos == []
        assert [v.id for v in result[1].videos] == [video.id]


class TestDashboards:
    """Test purchases-with-videos and dashboard aggregation"""

    def test_student_purchases_with_videos(self, store, catalog, student, test_video, professional):
        rate(store, student, test_video, 4)
        # Purchase of a video that no longer resolves is dropped
        store.create_purchase(user_id=student.id, video_id=999, amount=1, payment_method="pix")

        purchases = catalog.user_purchases_with_videos(student.id)

        assert len(purchases) == 1
        data = purchases[0].to_dict()
        assert data["videoId"] == test_video.id
        assert data["video"]["professional"]["id"] == professional.id
        assert data["video"]["averageRating"] == 4

    def test_student_dashboard(self, store, catalog, student, test_video):
        rating = rate(store, student, test_video, 3)

        data = catalog.student_dashboard(student.id)

        assert [p.purchase.video_id for p in data["purchases"]] == [test_video.id]
        assert data["ratings"] == [rating]

    def test_professional_dashboard_summary(self, store, catalog, professional, technology, student, other_student, test_video):
        second = create_video_in_store(store, professional, technology, "Second", price=10.0)
        rate(store, student, test_video, 5)
        rate(store, other_student, test_video, 3)
        store.create_purchase(user_id=student.id, video_id=second.id, amount=10.0, payment_method="pix")

        data = catalog.professional_dashboard(professional.id)

        assert [v.id for v in data["videos"]] == [test_video.id, second.id]
        assert len(data["purchases"]) == 3
        assert len(data["ratings"]) == 2

        summary = data["summary"]
        assert summary["totalVideos"] == 2
        assert summary["totalSales"] == 3
        assert summary["totalRevenue"] == 29.99 * 2 + 10.0
        assert summary["averageRating"] == 4

        first_row, second_row = summary["videos"]
        assert first_row == {
            "videoId": test_video.id,
            "title": test_video.title,
            "sales": 2,
            "revenue": 29.99 * 2,
            "ratingCount": 2,
            "averageRating": 4,
        }
        assert second_row["sales"] == 1
        assert second_row["ratingCount"] == 0
        assert second_row["averageRating"] == 0

    def test_professional_dashboard_ignores_other_owners(self, store, catalog, professional, technology, student, password_hash):
        rival = store.create_user(
            email="rival@example.com",
            username="rival",
            password=password_hash,
            name="Rival",
            user_type=UserType.PROFESSIONAL,
        )
        theirs = create_video_in_store(store, rival, technology, "Theirs")
        rate(store, student, theirs, 1)

        data = catalog.professional_dashboard(professional.id)

        assert data["videos"] == []
        assert data["purchases"] == []
        assert data["ratings"] == []
        assert data["summary"]["totalRevenue"] == 0
