from cliplugins.models import (
    App,
    AppsAndServices,
    Container,
    ContainersQuotaAndUsage,
    OrgUsage,
    SpaceUsage,
)


def test_apps_and_services_from_dict():
    data = {
        "apps": [
            {
                "name": "app1",
                "urls": ["app1.mybluemix.net"],
                "memory": 256,
                "instances": 2,
                "running_instances": 0,
                "diego": True,
                "state": "STOPPED",
            }
        ],
        "services": [
            {
                "name": "serviceA-instance1",
                "service_plan": {"name": "serviceA-plan", "service": {"label": "serviceA"}},
            }
        ],
    }
    summary = AppsAndServices.from_dict(data)
    assert summary.apps == [
        App(
            name="app1",
            urls=["app1.mybluemix.net"],
            memory=256,
            total_instances=2,
            running_instances=0,
            is_diego=True,
            state="STOPPED",
        )
    ]
    assert summary.services[0].service_plan.name == "serviceA-plan"
    assert summary.services[0].service_plan.service_offering.label == "serviceA"


def test_nulls_and_missing_fields_leave_defaults():
    assert AppsAndServices.from_dict({"apps": None}) == AppsAndServices()
    assert AppsAndServices.from_dict(None) == AppsAndServices()


def test_org_usage_totals():
    usage = OrgUsage.from_dict(
        {
            "name": "org1",
            "spaces": [
                {"name": "space1", "app_count": 2, "service_count": 1,
                 "mem_dev_total": 1028, "mem_prod_total": 512},
                {"name": "space2", "app_count": 1, "service_count": 1,
                 "mem_dev_total": 256, "mem_prod_total": 0},
            ],
        }
    )
    assert usage.org == "org1"
    assert usage.spaces[0] == SpaceUsage("space1", 2, 1, 1028, 512)
    assert usage.total_memory_used() == 1796
    assert usage.apps_count() == 3
    assert usage.services_count() == 2


def test_empty_org_usage_counts_nothing():
    usage = OrgUsage()
    assert usage.total_memory_used() == usage.apps_count() == usage.services_count() == 0


def test_container_from_dict():
    container = Container.from_dict(
        {
            "ContainerState": "Shutdown",
            "Created": 1484718254,
            "Group": {},
            "Image": "registry/image2",
            "Memory": 512,
            "Name": "container3",
        }
    )
    assert container.name == "container3"
    assert container.group.name == ""
    assert container.memory == 512
    assert container.created == 1484718254
    assert container.image == "registry/image2"
    assert container.state == "Shutdown"


def test_container_group_name():
    container = Container.from_dict({"Group": {"Id": "group1-id", "Name": "group1"}})
    assert container.group.name == "group1"


def test_quota_and_usage_from_dict():
    result = ContainersQuotaAndUsage.from_dict(
        {
            "Limits": {"containers": -1, "floating_ips": 2, "memory_MB": 2048, "vcpu": -1},
            "Usage": {"containers": 5, "floating_ips": 1, "floating_ips_bound": 1,
                      "memory_MB": 1280, "running": 2, "vcpu": 5},
        }
    )
    assert result.limits.instances_count_limit == -1
    assert result.limits.memory_limit_in_mb == 2048
    assert result.limits.floating_ip_count_limit == 2
    assert result.usage.total_instances == 5
    assert result.usage.running_instances == 2
    assert result.usage.bound_floating_ips_count == 1
    assert result.usage.memory_in_mb == 1280